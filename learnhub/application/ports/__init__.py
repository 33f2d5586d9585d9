from learnhub.application.ports.read_model import AssessmentReadModel
from learnhub.application.ports.collaborators import CertificateIssuerPort, CompletionNotifierPort

__all__ = [
    "AssessmentReadModel",
    "CertificateIssuerPort",
    "CompletionNotifierPort",
]
