from typing import Optional

from pydantic import BaseModel


class Run(BaseModel):
    """
    Data model representing one log file and the name it is shown under.
    """

    name: str
    path: str

    @classmethod
    def from_path(cls, path: str, title: Optional[str] = None) -> "Run":
        """
        Create a Run whose display name defaults to the file path.

        Args:
            path (str): Path of the log file.
            title (Optional[str]): Display name given with --as, if any.

        Returns:
            Run: The new run.
        """
        return cls(name=path if title is None else title, path=path)

    def __repr__(self):
        return f"Run(name={self.name}, path={self.path})"
