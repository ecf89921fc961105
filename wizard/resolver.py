# wizard/resolver.py — turn the wizard answers into the voter's checklist
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Optional, Tuple

from utils.metadata_loader import ProvinceCatalog, get_catalog

from .constants import (
    EARLY_AT_HOME_SINGLE_TEXT,
    EARLY_AT_HOME_TEXT,
    EARLY_VOTING_DATE,
    ELECTION_EARLY_TITLE,
    ELECTION_TITLE,
    MAIN_VOTING_DATE,
    REFERENDUM_OUTSIDE_TITLE,
    REFERENDUM_TITLE,
)
from .state import Answers, Feb8Location


class Category(str, Enum):
    ELECTION = "election"
    REFERENDUM = "referendum"


class RegistrationKind(str, Enum):
    EARLY = "early"      # early / out-of-constituency (election)
    OUTSIDE = "outside"  # out-of-constituency on the main date (referendum)
    NONE = "none"


class IncompleteAnswersError(ValueError):
    """Raised when resolve() is called before the wizard reached the results step."""


@dataclass(frozen=True)
class ActionRecord:
    category: Category
    title: str
    date: date
    needs_registration: bool
    registration_kind: RegistrationKind
    location: Optional[str]           # what the results page shows
    resolved_location: Optional[str]  # where the voter actually is on that date
    icon: str

    @property
    def location_hidden(self) -> bool:
        return self.location is None and self.resolved_location is not None


@dataclass(frozen=True)
class Resolution:
    actions: Tuple[ActionRecord, ActionRecord]
    election_needs_registration: bool
    referendum_needs_registration: bool
    early_vote_at_home: bool
    single_constituency_home: bool
    two_ballots_same_place: bool

    @property
    def election(self) -> ActionRecord:
        return self.actions[0]

    @property
    def referendum(self) -> ActionRecord:
        return self.actions[1]

    @property
    def early_vote_advisory(self) -> Optional[str]:
        if not self.early_vote_at_home:
            return None
        return EARLY_AT_HOME_SINGLE_TEXT if self.single_constituency_home else EARLY_AT_HOME_TEXT


def _check_complete(answers: Answers) -> None:
    if not answers.voting_province or answers.feb8_location is None or not answers.feb8_province:
        raise IncompleteAnswersError("voting province and 8 Feb location are required")
    if answers.feb8_location is Feb8Location.OTHER and (answers.feb1_location is None or not answers.feb1_province):
        raise IncompleteAnswersError("1 Feb location is required when away on 8 Feb")


def resolve(answers: Answers, catalog: Optional[ProvinceCatalog] = None) -> Resolution:
    _check_complete(answers)
    catalog = catalog if catalog is not None else get_catalog()
    home = answers.voting_province
    single_home = catalog.is_single_constituency(home)

    if answers.feb8_location is Feb8Location.SAME:
        election = ActionRecord(
            category=Category.ELECTION,
            title=ELECTION_TITLE,
            date=MAIN_VOTING_DATE,
            needs_registration=False,
            registration_kind=RegistrationKind.NONE,
            location=home,
            resolved_location=home,
            icon="how_to_vote",
        )
        referendum = ActionRecord(
            category=Category.REFERENDUM,
            title=REFERENDUM_TITLE,
            date=MAIN_VOTING_DATE,
            needs_registration=False,
            registration_kind=RegistrationKind.NONE,
            location=home,
            resolved_location=home,
            icon="description",
        )
        early_at_home = False
    else:
        early_at_home = answers.feb1_province == home
        election = ActionRecord(
            category=Category.ELECTION,
            title=ELECTION_EARLY_TITLE,
            date=EARLY_VOTING_DATE,
            needs_registration=True,
            registration_kind=RegistrationKind.EARLY,
            location=None if (early_at_home and single_home) else answers.feb1_province,
            resolved_location=answers.feb1_province,
            icon="how_to_vote",
        )
        # Referendum has no early voting: outside voting on the main date only.
        referendum = ActionRecord(
            category=Category.REFERENDUM,
            title=REFERENDUM_OUTSIDE_TITLE,
            date=MAIN_VOTING_DATE,
            needs_registration=True,
            registration_kind=RegistrationKind.OUTSIDE,
            location=answers.feb8_province,
            resolved_location=answers.feb8_province,
            icon="description",
        )

    actions = (election, referendum)
    return Resolution(
        actions=actions,
        election_needs_registration=any(r.category is Category.ELECTION and r.needs_registration for r in actions),
        referendum_needs_registration=any(r.category is Category.REFERENDUM and r.needs_registration for r in actions),
        early_vote_at_home=early_at_home,
        single_constituency_home=single_home,
        two_ballots_same_place=answers.feb8_location is Feb8Location.SAME,
    )
