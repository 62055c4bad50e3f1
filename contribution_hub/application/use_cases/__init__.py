"""Application use cases package."""

from .authenticate import AuthenticateUseCase
from .get_client_dashboard import ClientDashboard, GetClientDashboardUseCase
from .get_ledger import GetLedgerUseCase, LedgerReport
from .get_manager_dashboard import (
    GetManagerDashboardUseCase,
    ManagerDashboard,
)
from .manage_accounts import (
    DeleteAccountResult,
    DeleteAccountUseCase,
    ResetCredentialUseCase,
    SetCredentialUseCase,
)
from .notifications import GetNotificationsUseCase, SendNotificationUseCase
from .register_account import RegisterAccountUseCase
from .review_payment import ReviewPaymentUseCase
from .review_registration import ApproveAccountUseCase, RejectAccountUseCase
from .settings import (
    GetSettingsUseCase,
    ToggleRemindersUseCase,
    UpdateSettingsUseCase,
)
from .submit_payment import SubmitPaymentUseCase

__all__ = [
    "AuthenticateUseCase",
    "ClientDashboard",
    "GetClientDashboardUseCase",
    "GetLedgerUseCase",
    "LedgerReport",
    "GetManagerDashboardUseCase",
    "ManagerDashboard",
    "DeleteAccountResult",
    "DeleteAccountUseCase",
    "ResetCredentialUseCase",
    "SetCredentialUseCase",
    "GetNotificationsUseCase",
    "SendNotificationUseCase",
    "RegisterAccountUseCase",
    "ReviewPaymentUseCase",
    "ApproveAccountUseCase",
    "RejectAccountUseCase",
    "GetSettingsUseCase",
    "ToggleRemindersUseCase",
    "UpdateSettingsUseCase",
    "SubmitPaymentUseCase",
]
