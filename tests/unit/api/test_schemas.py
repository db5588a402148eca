"""Unit tests for hub API schemas."""

import pytest
from pydantic import ValidationError

from modules.api.schemas import HubVisit, Profile, VisitPerson


class TestProfile:
    def test_ignores_extra_fields(self) -> None:
        profile = Profile.model_validate({"id": 1, "name": "Ada", "email": "ada@example.com"})

        assert profile == Profile(id=1, name="Ada")

    def test_is_immutable(self) -> None:
        profile = Profile(id=1, name="Ada")

        with pytest.raises(ValidationError):
            profile.name = "Grace"


class TestHubVisit:
    def test_notes_default_to_none(self) -> None:
        visit = HubVisit.model_validate({"date": "2024-01-15", "person": {"id": 1, "name": "Ada"}})

        assert visit.notes is None
        assert visit.person == VisitPerson(id=1, name="Ada")

    @pytest.mark.parametrize("notes", [None, ""])
    def test_display_notes_suppresses_empty(self, notes) -> None:
        visit = HubVisit(date="2024-01-15", notes=notes, person=VisitPerson(id=1, name="Ada"))

        assert visit.display_notes is None

    def test_display_notes_returns_text(self) -> None:
        visit = HubVisit(date="2024-01-15", notes="pairing", person=VisitPerson(id=1, name="Ada"))

        assert visit.display_notes == "pairing"

    def test_person_is_required(self) -> None:
        with pytest.raises(ValidationError):
            HubVisit.model_validate({"date": "2024-01-15"})
