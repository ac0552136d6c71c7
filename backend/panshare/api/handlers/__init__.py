"""
API Handlers

One router per area; routes.py mounts them under their prefixes.

- health_handler: /health, /ready, /live
- auth_handler: /auth/register, /auth/login, /auth/me
- pan_share_handler: /pan-shares (public catalog, submissions, secrets)
- admin_handler: /admin/pan-shares (review and management)
- upload_handler: /admin/uploads (cover images)
"""
