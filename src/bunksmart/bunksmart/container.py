from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from .advisor.base import AdviceProvider, StaticAdviceProvider
from .advisor.litellm_provider import LiteLLMAdviceProvider
from .advisor.service import AdvisorService
from .core.constants import (
    ADVICE_FALLBACK,
    DEFAULT_ADVISOR_MODEL,
    DEFAULT_ADVISOR_TIMEOUT_SECONDS,
    DEFAULT_TARGET_PERCENTAGE,
)
from .metrics.calculator.standard_calculator import StandardMetricsCalculator
from .metrics.service import MetricsReportService
from .state.json_state_repository import JsonStateRepository
from .state.repository import StateRepository
from .state.service import SettingsService
from .state.store import AppStateStore
from .storage.json_base import JsonFileStore
from .subjects.service import SubjectService
from .users.json_account_repository import JsonAccountRepository
from .users.repository import AccountRepository
from .users.service import AuthService, ProfileService, random_verification_code


@dataclass(frozen=True)
class Container:
    state_repo: StateRepository
    accounts_repo: AccountRepository
    store: AppStateStore

    auth_service: AuthService
    profile_service: ProfileService
    settings_service: SettingsService
    subject_service: SubjectService
    metrics_service: MetricsReportService
    advisor_service: AdvisorService


def build_advice_provider(app_config: dict) -> AdviceProvider:
    if not bool(app_config.get("ADVISOR_ENABLED", True)):
        return StaticAdviceProvider(ADVICE_FALLBACK)

    return LiteLLMAdviceProvider(
        model=str(app_config.get("ADVISOR_MODEL") or DEFAULT_ADVISOR_MODEL),
        timeout=int(app_config.get("ADVISOR_TIMEOUT_SECONDS", DEFAULT_ADVISOR_TIMEOUT_SECONDS)),
    )


def build_container(
    *,
    app_config: dict,
    state_repo: Optional[StateRepository] = None,
    accounts_repo: Optional[AccountRepository] = None,
    advice_provider: Optional[AdviceProvider] = None,
    code_factory: Callable[[], str] = random_verification_code,
) -> Container:
    files = JsonFileStore(str(app_config["DATA_DIR"]))

    state_repo = state_repo or JsonStateRepository(files)
    accounts_repo = accounts_repo or JsonAccountRepository(files)
    store = AppStateStore(
        state_repo,
        default_target=float(app_config.get("DEFAULT_TARGET_PERCENTAGE", DEFAULT_TARGET_PERCENTAGE)),
    )

    calculator = StandardMetricsCalculator()

    auth_service = AuthService(accounts_repo, store, code_factory=code_factory)
    profile_service = ProfileService(store)
    settings_service = SettingsService(store)
    subject_service = SubjectService(store)
    metrics_service = MetricsReportService(store, calculator=calculator)
    advisor_service = AdvisorService(
        advice_provider or build_advice_provider(app_config),
        calculator=calculator,
    )

    return Container(
        state_repo=state_repo,
        accounts_repo=accounts_repo,
        store=store,
        auth_service=auth_service,
        profile_service=profile_service,
        settings_service=settings_service,
        subject_service=subject_service,
        metrics_service=metrics_service,
        advisor_service=advisor_service,
    )
