"""Gateway constants: hash algorithms, checksum field orders, statuses and hosts."""

from __future__ import annotations

from enum import Enum

INTEGRATION_HOST = "https://ppp-test.safecharge.com/ppp/"
PRODUCTION_HOST = "https://secure.safecharge.com/ppp/"
API_PATH = "api/v1/"

TIME_STAMP_FORMAT = "%Y%m%d%H%M%S"
CHECKSUM_ENCODING = "utf-8"

CLIENT_REQUEST_ID_MAX_LENGTH = 20


class HashAlgorithm(str, Enum):
    """Digest used to produce the request checksum."""

    MD5 = "MD5"
    SHA256 = "SHA256"


class ChecksumOrderMapping(Enum):
    """Ordered wire field names hashed into each request type's checksum.

    The merchant secret key is always appended after the last field.
    """

    API_GENERIC_CHECKSUM_MAPPING = (
        "merchantId",
        "merchantSiteId",
        "clientRequestId",
        "timeStamp",
    )
    OPEN_ORDER = (
        "merchantId",
        "merchantSiteId",
        "clientRequestId",
        "amount",
        "currency",
        "timeStamp",
    )
    TRANSACTION_ACTION = (
        "merchantId",
        "merchantSiteId",
        "clientRequestId",
        "clientUniqueId",
        "amount",
        "currency",
        "relatedTransactionId",
        "authCode",
        "comment",
        "timeStamp",
    )
    ADD_CASHIER_APM = (
        "merchantId",
        "merchantSiteId",
        "userTokenId",
        "clientRequestId",
        "paymentMethodName",
        "timeStamp",
    )
    ADD_CASHIER_CC = (
        "merchantId",
        "merchantSiteId",
        "userTokenId",
        "clientRequestId",
        "ccCardNumber",
        "ccExpMonth",
        "ccExpYear",
        "ccNameOnCard",
        "timeStamp",
    )
    CANCEL_CASHIER_SUBSCRIPTION = (
        "merchantId",
        "merchantSiteId",
        "subscriptionId",
        "userTokenId",
        "timeStamp",
    )

    @property
    def fields(self) -> tuple[str, ...]:
        return self.value


class APIResponseStatus(str, Enum):
    SUCCESS = "SUCCESS"
    ERROR = "ERROR"


class TransactionStatus(str, Enum):
    APPROVED = "APPROVED"
    DECLINED = "DECLINED"
    ERROR = "ERROR"
    REDIRECT = "REDIRECT"
    PENDING = "PENDING"


class ErrorType(str, Enum):
    """Error categories reported in the ``errorType`` response field."""

    SESSION_EXPIRED = "SESSION_EXPIRED"
    INVALID_CHECKSUM = "INVALID_CHECKSUM"
    INVALID_REQUEST = "INVALID_REQUEST"
    INVALID_MERCHANT = "INVALID_MERCHANT"
    MISSING_PARAMETERS = "MISSING_PARAMETERS"
    NO_SUCH_TRANSACTION = "NO_SUCH_TRANSACTION"
    INVALID_TRANSACTION_STATE = "INVALID_TRANSACTION_STATE"
    UNKNOWN_PAYMENT_METHOD = "UNKNOWN_PAYMENT_METHOD"
    SYSTEM_ERROR = "SYSTEM_ERROR"
