"""
mp_rbac – role-based access control for web applications.

Import path convention::

    from mp_rbac.rbac import AuthorizationService, InMemoryRoleProvider, Role
    from mp_rbac.kernel.security import Principal, SecurityContext
    from mp_rbac.config import EnvSettingsLoader, RbacSettings
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
