# assettrail/errors.py
"""
Errors raised by path resolution.

Only a failed lookup is a hard error. A fingerprint that does not match
the built asset is reported as a missing asset instead.
"""


class FileNotFound(FileNotFoundError):
    """No candidate for a logical path exists in any search path."""

    def __init__(self, logical_path: str):
        self.logical_path = str(logical_path)
        super().__init__(f"couldn't find file '{self.logical_path}'")
