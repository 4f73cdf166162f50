from pathlib import Path


class CorpusError(Exception):
    """Base user-facing corpus error."""


class CorpusFileError(CorpusError):
    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        self.message = message
        super().__init__(f"{message}: {path}")


class MissingSkillError(CorpusFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Skill file not found")


class MissingAgentError(CorpusFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Agent definition not found")


class InvalidJsonFormatError(CorpusFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid JSON format ({detail})")


class InvalidConfigError(CorpusFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid lint config ({detail})")


class InvalidPipelineConfigError(CorpusFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid pipeline config ({detail})")


class InvalidEncodingError(CorpusFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"File is not valid UTF-8 ({detail})")


class InvalidIndexError(CorpusFileError):
    def __init__(self, path: Path, detail: str) -> None:
        self.detail = detail
        super().__init__(path=path, message=f"Invalid index file ({detail})")


class InstallTargetError(CorpusFileError):
    def __init__(self, path: Path) -> None:
        super().__init__(path=path, message="Install target must not be the corpus root")
