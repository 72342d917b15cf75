class APIError(Exception):
    """Non-2xx answer from the planner API"""

    def __init__(self, status_code, message, field=None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.field = field

    def __str__(self):
        return f'{self.status_code}: {self.message}'


class NotAuthenticated(APIError):
    """The request had no valid session"""

    def __init__(self, message='Unauthorized'):
        super().__init__(401, message)
