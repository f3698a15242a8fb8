"""
Application lifecycle state machine.

    pending -> reviewing -> interview -> reference_check -> offer_sent -> hired
    rejected is reachable from every non-terminal status.
    hired and rejected are absorbing.

`plan_transition` is a pure function: it validates an action against the
current status and returns the status to write plus the side effects the
caller is expected to run. It never performs them.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Tuple, Union

from models.application import ApplicationStatus, TERMINAL_STATUSES
from utils.exceptions import ValidationError


class Action(str, Enum):
    SUBMIT_ANSWERS = "submit_answers"
    ADVANCE_TO_REVIEWING = "advance_to_reviewing"
    ADVANCE_TO_INTERVIEW = "advance_to_interview"
    REQUEST_REFERENCE = "request_reference"
    SEND_OFFER = "send_offer"
    ACCEPT_OFFER = "accept_offer"
    REJECT = "reject"
    COMPLETE_INTERVIEW = "complete_interview"


class Effect(str, Enum):
    SCORE = "score"
    ANALYZE = "analyze"
    SUMMARIZE = "summarize"
    CREATE_REFERENCE = "create_reference"
    NOTIFY_REFEREE = "notify_referee"
    CREATE_OFFER = "create_offer"
    NOTIFY_CANDIDATE = "notify_candidate"
    GENERATE_ONBOARDING_EMAIL = "generate_onboarding_email"
    GENERATE_REJECTION_EMAIL = "generate_rejection_email"


_NON_TERMINAL: FrozenSet[ApplicationStatus] = frozenset(
    s for s in ApplicationStatus if s not in TERMINAL_STATUSES
)

# action -> (allowed source statuses, target status, effects)
_TRANSITIONS: Dict[Action, Tuple[FrozenSet[ApplicationStatus], ApplicationStatus, Tuple[Effect, ...]]] = {
    Action.SUBMIT_ANSWERS: (
        frozenset({ApplicationStatus.PENDING}),
        ApplicationStatus.REVIEWING,
        (Effect.SCORE, Effect.ANALYZE),
    ),
    Action.ADVANCE_TO_REVIEWING: (
        frozenset({ApplicationStatus.PENDING}),
        ApplicationStatus.REVIEWING,
        (),
    ),
    Action.ADVANCE_TO_INTERVIEW: (
        frozenset({ApplicationStatus.PENDING, ApplicationStatus.REVIEWING}),
        ApplicationStatus.INTERVIEW,
        (),
    ),
    Action.REQUEST_REFERENCE: (
        frozenset({ApplicationStatus.REVIEWING, ApplicationStatus.INTERVIEW}),
        ApplicationStatus.REFERENCE_CHECK,
        (Effect.CREATE_REFERENCE, Effect.NOTIFY_REFEREE),
    ),
    Action.SEND_OFFER: (
        frozenset({
            ApplicationStatus.REVIEWING,
            ApplicationStatus.INTERVIEW,
            ApplicationStatus.REFERENCE_CHECK,
        }),
        ApplicationStatus.OFFER_SENT,
        (Effect.CREATE_OFFER, Effect.NOTIFY_CANDIDATE),
    ),
    Action.ACCEPT_OFFER: (
        _NON_TERMINAL,
        ApplicationStatus.HIRED,
        (Effect.GENERATE_ONBOARDING_EMAIL, Effect.NOTIFY_CANDIDATE),
    ),
    Action.REJECT: (
        _NON_TERMINAL,
        ApplicationStatus.REJECTED,
        (Effect.GENERATE_REJECTION_EMAIL, Effect.NOTIFY_CANDIDATE),
    ),
    Action.COMPLETE_INTERVIEW: (
        _NON_TERMINAL,
        ApplicationStatus.INTERVIEW,
        (Effect.SUMMARIZE, Effect.ANALYZE),
    ),
}

# Forward order of the pipeline, used to detect backwards moves
PIPELINE_ORDER: Tuple[ApplicationStatus, ...] = (
    ApplicationStatus.PENDING,
    ApplicationStatus.REVIEWING,
    ApplicationStatus.INTERVIEW,
    ApplicationStatus.REFERENCE_CHECK,
    ApplicationStatus.OFFER_SENT,
    ApplicationStatus.HIRED,
)


@dataclass(frozen=True)
class TransitionPlan:
    action: Action
    from_status: ApplicationStatus
    to_status: ApplicationStatus
    effects: Tuple[Effect, ...] = field(default_factory=tuple)

    @property
    def is_backwards(self) -> bool:
        """True when the target sits earlier in the pipeline than the source."""
        if self.from_status not in PIPELINE_ORDER or self.to_status not in PIPELINE_ORDER:
            return False
        return PIPELINE_ORDER.index(self.to_status) < PIPELINE_ORDER.index(self.from_status)


def _coerce_status(status: Union[str, ApplicationStatus]) -> ApplicationStatus:
    try:
        return ApplicationStatus(status)
    except ValueError:
        raise ValidationError(f"Unknown application status: {status}")


def is_terminal(status: Union[str, ApplicationStatus]) -> bool:
    return _coerce_status(status) in TERMINAL_STATUSES


def plan_transition(
    current_status: Union[str, ApplicationStatus],
    action: Union[str, Action],
    *,
    has_reference: bool = False,
    has_offer: bool = False,
) -> TransitionPlan:
    """
    Validate a lifecycle action and plan the resulting transition.

    Args:
        current_status: Status the application currently has
        action: Lifecycle action being attempted
        has_reference: Whether a Reference already exists for the application
        has_offer: Whether a JobOffer already exists for the application

    Returns:
        TransitionPlan with the target status and the effects to run

    Raises:
        ValidationError: If the action is unknown, the status is incompatible,
            or a guard (one reference, one offer) is violated
    """
    status = _coerce_status(current_status)
    try:
        action = Action(action)
    except ValueError:
        raise ValidationError(f"Unknown action: {action}")

    if status in TERMINAL_STATUSES:
        raise ValidationError(
            f"Application is {status.value}; no further transitions are allowed"
        )

    allowed, target, effects = _TRANSITIONS[action]
    if status not in allowed:
        allowed_names = ", ".join(sorted(s.value for s in allowed))
        raise ValidationError(
            f"Cannot {action.value} an application in status '{status.value}' "
            f"(allowed: {allowed_names})"
        )

    if action == Action.REQUEST_REFERENCE and has_reference:
        raise ValidationError("A reference has already been requested for this application")
    if action == Action.SEND_OFFER and has_offer:
        raise ValidationError("An offer has already been sent for this application")

    return TransitionPlan(action=action, from_status=status, to_status=target, effects=effects)
