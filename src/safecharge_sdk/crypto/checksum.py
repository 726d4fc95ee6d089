"""Request checksum computation.

A checksum is the hex digest of the values of a fixed, ordered list of request
fields concatenated with the merchant secret key. The gateway recomputes it
with its copy of the key to authenticate the request.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Sequence, Union

from cryptography.hazmat.primitives import constant_time, hashes

from ..domain.constants import CHECKSUM_ENCODING, HashAlgorithm
from ..domain.errors import UnsupportedHashAlgorithmError

if TYPE_CHECKING:
    from ..application.requests.base import SafechargeRequest

_DIGESTS: dict[HashAlgorithm, type[hashes.HashAlgorithm]] = {
    HashAlgorithm.MD5: hashes.MD5,
    HashAlgorithm.SHA256: hashes.SHA256,
}


def checksum_source(
    values: Mapping[str, Any], order: Sequence[str], merchant_key: str
) -> str:
    """Concatenate the values named by ``order`` and append the merchant key.

    Missing or ``None`` values contribute an empty string.
    """
    parts = []
    for name in order:
        value = values.get(name)
        parts.append("" if value is None else str(value))
    parts.append(merchant_key)
    return "".join(parts)


def _resolve_digest(algorithm: Union[HashAlgorithm, str]) -> hashes.HashAlgorithm:
    try:
        return _DIGESTS[HashAlgorithm(algorithm)]()
    except (KeyError, ValueError) as e:
        raise UnsupportedHashAlgorithmError(
            f"Unsupported checksum hash algorithm: {algorithm!r}"
        ) from e


def calculate_checksum(
    values: Mapping[str, Any],
    order: Sequence[str],
    merchant_key: str,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA256,
) -> str:
    """Return the lower-case hex digest of the checksum source."""
    digest = hashes.Hash(_resolve_digest(algorithm))
    digest.update(
        checksum_source(values, order, merchant_key).encode(CHECKSUM_ENCODING)
    )
    return digest.finalize().hex()


def request_checksum(
    request: SafechargeRequest,
    merchant_key: str,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA256,
) -> str:
    """Compute the checksum of a request using its type's order mapping."""
    return calculate_checksum(
        request.to_wire(),
        request.checksum_mapping.fields,
        merchant_key,
        algorithm,
    )


def verify_request_checksum(
    request: SafechargeRequest,
    merchant_key: str,
    algorithm: Union[HashAlgorithm, str] = HashAlgorithm.SHA256,
) -> bool:
    """Check that the checksum carried by ``request`` matches its fields."""
    if not request.checksum:
        return False
    expected = request_checksum(request, merchant_key, algorithm)
    return constant_time.bytes_eq(
        expected.encode(CHECKSUM_ENCODING), request.checksum.encode(CHECKSUM_ENCODING)
    )
