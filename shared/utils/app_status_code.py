class AppStatusCode:
    # Input
    INVALID_INPUT = "200"
    REQUIRED_VALIDATION_ERROR = "201"
    NOT_FOUND = "202"

    # Orders
    INVALID_STATUS_TRANSITION = "300"
    INVALID_ORDER_STATE = "301"

    # Authentication
    AUTHENTICATION_CREDENTIALS_INVALID = "400"

    # Server
    INTERNAL_ERROR = "500"
