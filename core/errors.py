class DashdeckError(RuntimeError):
    pass


class LaunchError(DashdeckError):
    """An external viewer or VM session could not be started."""


class RemoteServiceError(DashdeckError):
    pass
