"""ORM Models — SQLAlchemy declarative models mirroring core/entities.py.

Invariants:
    - All models inherit from Base (db/base.py)
    - Column names equal dataclass field names (SqlRepository copies by name)
    - Integer primary keys with sqlite_autoincrement: ids never reused after delete
    - Foreign-key columns are plain indexed integers, no FK constraints

Design Decisions:
    - No FK constraints: deleting a project must not cascade or fail because of
      dependent skills/applications/reviews (ADR: parity with the memory backend)
    - One file per entity for locality (ADR: ExMA max 3-4 files to understand a feature)
    - All models imported here so Base.metadata is complete before create_all
"""

from hackerhire.models.user import User  # noqa: F401
from hackerhire.models.project import Project  # noqa: F401
from hackerhire.models.project_skill import ProjectSkill  # noqa: F401
from hackerhire.models.hacker_skill import HackerSkill  # noqa: F401
from hackerhire.models.hacker_certification import HackerCertification  # noqa: F401
from hackerhire.models.review import Review  # noqa: F401
from hackerhire.models.testimonial import Testimonial  # noqa: F401
from hackerhire.models.application import Application  # noqa: F401
from hackerhire.models.contact_message import ContactMessage  # noqa: F401
