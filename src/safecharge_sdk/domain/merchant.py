from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .constants import HashAlgorithm


class MerchantInfo(BaseModel):
    """Merchant credentials needed to sign requests and reach the gateway.

    Attributes:
        merchant_key: Secret key obtained during integration; never sent over the wire.
        merchant_id: Merchant id in the gateway's system.
        merchant_site_id: Merchant site id in the gateway's system.
        server_host: Gateway address the requests are sent to.
        hash_algorithm: Digest used to compute request checksums.
    """

    model_config = ConfigDict(frozen=True)

    merchant_key: str = Field(..., min_length=1, repr=False)
    merchant_id: str = Field(..., min_length=1)
    merchant_site_id: str = Field(..., min_length=1)
    server_host: str = Field(..., min_length=1)
    hash_algorithm: HashAlgorithm = HashAlgorithm.SHA256
