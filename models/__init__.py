from models.company import Company
from models.candidate import Candidate
from models.job import Job, JobStatus, CameraRequired
from models.application import Application, ApplicationStatus, TERMINAL_STATUSES
from models.application_event import ApplicationEvent
from models.job_offer import JobOffer, OfferStatus
from models.reference import Reference, ReferenceResponse
from models.message import Message, SenderRole
from models.interview_message import InterviewMessage, InterviewRole
from models.ai_analysis import AIAnalysis

__all__ = [
    "Company",
    "Candidate",
    "Job",
    "JobStatus",
    "CameraRequired",
    "Application",
    "ApplicationStatus",
    "TERMINAL_STATUSES",
    "ApplicationEvent",
    "JobOffer",
    "OfferStatus",
    "Reference",
    "ReferenceResponse",
    "Message",
    "SenderRole",
    "InterviewMessage",
    "InterviewRole",
    "AIAnalysis",
]
