"""Engagement and contact schemas — bounds and allowed values."""

import pytest
from pydantic import ValidationError

from hackerhire.schemas.contact import ContactMessageCreate
from hackerhire.schemas.engagement import ApplicationCreate, ApplicationDecision, ReviewCreate


@pytest.mark.parametrize("rating", [0.5, 5.5])
def test_review_rating_bounds(rating):
    with pytest.raises(ValidationError):
        ReviewCreate(project_id=1, client_id=1, hacker_id=2, rating=rating)


def test_review_comment_optional():
    assert ReviewCreate(project_id=1, client_id=1, hacker_id=2, rating=4).comment is None


def test_application_requires_proposal():
    with pytest.raises(ValidationError):
        ApplicationCreate(
            project_id=1, hacker_id=2, proposal="", estimated_time="1w", price_quote="$1",
        )


def test_decision_cannot_return_to_pending():
    with pytest.raises(ValidationError):
        ApplicationDecision(status="pending")
    assert ApplicationDecision(status="accepted").status == "accepted"


def test_contact_inquiry_type_validated():
    with pytest.raises(ValidationError):
        ContactMessageCreate(
            name="n", email="n@x.io", subject="s", message="m", inquiry_type="spam",
        )
