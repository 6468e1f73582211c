class InstallerError(Exception):
    """Base class for installer failures the operator can recover from."""


class ArchiveError(InstallerError):
    pass


class ArchiveReadError(ArchiveError):
    """The file is not a readable gzip-compressed tar archive."""


class ArchiveExtractError(ArchiveError):
    """An entry could not be written, was missing, or would leave the destination."""


class ReconcileError(InstallerError):
    pass


class ExtractionFailed(ReconcileError):
    def __init__(self, message):
        super().__init__(message)
        self.message = message


class EmptyStaging(ReconcileError):
    def __init__(self, path):
        super().__init__(f"No file upload provided and the staging directory {path} is empty")
        self.path = path


class DirectoryNotWritable(ReconcileError):
    def __init__(self, path):
        super().__init__(f"The directory {path} could not be created or could not be made writable")
        self.path = path


class StagingIOError(ReconcileError):
    pass
