"""Infrastructure modules for the membership relay.

Centralized infrastructure components:
- configuration: Settings management (settings, Settings)
- logging: Structured logging (configure_logging, get_module_logger)
- operations: Operation results and status enum
- persistence: Identity mapping store backends
- security: Shared-secret and signature trust boundaries
- services: Dependency injection services (SettingsDep, get_settings)
"""
