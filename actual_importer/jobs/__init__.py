"""Job layer package for grouping and import orchestration boundaries."""

from .grouping import job_group_rows
from .import_orchestrator import ImportJobOrchestrator, ImportOrchestratorConfig
from .interfaces import GroupImportError, ImportConfigurationError, ImportOrchestratorPort

__all__ = [
	"GroupImportError",
	"ImportConfigurationError",
	"ImportJobOrchestrator",
	"ImportOrchestratorConfig",
	"ImportOrchestratorPort",
	"job_group_rows",
]
