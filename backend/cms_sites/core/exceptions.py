class SiteError(Exception):
    pass


class SiteValidationError(SiteError):
    """Blank or malformed site fields. `errors` maps field name to messages."""

    def __init__(self, errors: dict[str, list[str]]):
        self.errors = errors
        super().__init__(f"Invalid site fields: {', '.join(sorted(errors))}")

    @property
    def fields(self) -> list[str]:
        return sorted(self.errors)


class UniquenessConflict(SiteError):
    def __init__(self, fields: list[str], detail: str | None = None):
        self.fields = fields
        super().__init__(detail or f"Site already exists for: {', '.join(fields)}")


class ProvisioningFailure(SiteError):
    pass
