from __future__ import annotations

from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class S3Location:
    """An S3 bucket/key pair the processed image is written to."""

    bucket: str
    key: str

    @classmethod
    def of(cls, bucket: str, key: str) -> "S3Location":
        return cls(bucket=bucket, key=key)

    def to_dict(self) -> Dict[str, str]:
        return {"bucket": self.bucket, "key": self.key}


@dataclass(frozen=True)
class AzureLocation:
    """
    An Azure storage account plus the shared access signature that authorises
    the upload. The signature is passed through as an opaque string.
    """

    account_name: str
    shared_access_signature: str

    @classmethod
    def of(cls, account_name: str, shared_access_signature: str) -> "AzureLocation":
        return cls(account_name=account_name, shared_access_signature=shared_access_signature)

    def to_dict(self) -> Dict[str, str]:
        return {
            "account_name": self.account_name,
            "shared_access_signature": self.shared_access_signature,
        }
