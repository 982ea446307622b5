def request_user(request):
    """Authenticated user for audit fields, or None for anonymous requests"""
    user = getattr(request, 'user', None)
    if user is not None and user.is_authenticated:
        return user
    return None
