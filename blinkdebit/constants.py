# Headers
REQUEST_ID = "request-id"
CORRELATION_ID = "x-correlation-id"
IDEMPOTENCY_KEY = "idempotency-key"
CUSTOMER_IP = "x-customer-ip"
CUSTOMER_USER_AGENT = "x-customer-user-agent"
AUTHORIZATION = "Authorization"
BEARER = "Bearer "

USER_AGENT_VALUE = "Python/Blink SDK 1.0"

# Paths
TOKEN_PATH = "/oauth2/token"
METADATA_PATH = "/payments/v1/meta"
SINGLE_CONSENTS_PATH = "/payments/v1/single-consents"
ENDURING_CONSENTS_PATH = "/payments/v1/enduring-consents"
QUICK_PAYMENTS_PATH = "/payments/v1/quick-payments"
PAYMENTS_PATH = "/payments/v1/payments"
REFUNDS_PATH = "/payments/v1/refunds"
