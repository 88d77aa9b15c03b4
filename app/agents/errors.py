## Errors raised while acquiring a roadmap


class RoadmapError(Exception):
    pass


class ProviderError(RoadmapError):
    """Provider answered with a non-success HTTP status."""

    def __init__(self, status: int, body: str):
        super().__init__(f"Provider error: {status}. {body}")
        self.status = status
        self.body = body


class EmptyGenerationError(RoadmapError):
    pass


class ExtractionFailure(RoadmapError):
    pass


class ParseFailure(RoadmapError):
    pass
