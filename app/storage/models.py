from dataclasses import dataclass


@dataclass(frozen=True)
class StoredBlob:
    """Location of an object written to the blob store."""

    public_url: str
    storage_path: str
