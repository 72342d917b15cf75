from rest_framework.authentication import SessionAuthentication


class CookieSessionAuthentication(SessionAuthentication):
    """
    Session cookie authentication that answers 401 instead of 403.

    DRF only returns 401 when the first authenticator supplies a
    ``WWW-Authenticate`` value; plain ``SessionAuthentication`` does not.
    """

    def authenticate_header(self, request):
        return 'Session'
