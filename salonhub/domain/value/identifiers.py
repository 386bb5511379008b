"""Strongly typed identifiers for domain entities.

Forum and blog rows use database serial ids; directory rows use slug ids derived
from names when the directory is seeded.
"""

from typing import NewType

TopicId = NewType("TopicId", int)
ReplyId = NewType("ReplyId", int)
BlogPostId = NewType("BlogPostId", int)

SalonId = NewType("SalonId", str)
StylistId = NewType("StylistId", str)
CertificationId = NewType("CertificationId", str)
