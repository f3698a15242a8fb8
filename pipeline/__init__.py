"""
Pipeline module - pure decision logic.

Nothing in here touches the database, the LLM or email. Services ask the
planners what should happen and then execute it.

Usage:
    from pipeline import Action, plan_transition, prepare_turn

    plan = plan_transition(application.status, Action.REJECT)
    turn = prepare_turn(application.interview_transcript, utterance)
"""

from pipeline.transitions import (
    Action,
    Effect,
    TransitionPlan,
    plan_transition,
    is_terminal,
)
from pipeline.interview import (
    MAX_USER_TURNS,
    TurnPlan,
    append_message,
    count_user_turns,
    is_interview_complete,
    prepare_turn,
)

__all__ = [
    "Action",
    "Effect",
    "TransitionPlan",
    "plan_transition",
    "is_terminal",
    "MAX_USER_TURNS",
    "TurnPlan",
    "append_message",
    "count_user_turns",
    "is_interview_complete",
    "prepare_turn",
]
