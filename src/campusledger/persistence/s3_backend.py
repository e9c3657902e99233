"""S3 staging bucket that uploaded import files are fetched from."""

from __future__ import annotations

import boto3
from botocore.exceptions import ClientError

from campusledger.core.exceptions import StorageError


class S3FileStore:
    """IFileStore reading staged uploads from one bucket."""

    def __init__(self, bucket: str, region: str = "us-east-1",
                 endpoint_url: str | None = None) -> None:
        self._bucket = bucket
        kwargs: dict = {"region_name": region}
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url
        self._client = boto3.client("s3", **kwargs)

    def read(self, path: str) -> bytes:
        try:
            obj = self._client.get_object(Bucket=self._bucket, Key=path)
        except ClientError as exc:
            code = exc.response.get("Error", {}).get("Code", "Unknown")
            raise StorageError(
                f"Could not read staged file s3://{self._bucket}/{path} ({code})"
            ) from exc
        return obj["Body"].read()
