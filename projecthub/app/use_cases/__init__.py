"""
Use Cases

Organized into domain folders:
- auth/: Signup, login, token refresh, sign-out, identity
- profiles/: Profile and preferences
- projects/: Project registry
- invitations/: Invitation workflow
- members/: Membership and ownership
- admin/: Maintenance operations

Import from subdirectories.
"""
