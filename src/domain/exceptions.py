"""
Exceções customizadas para o serviço de legendas.

Cada exceção carrega o status HTTP e o código de erro usados pela camada
de apresentação ao montar a resposta JSON.
"""


class DomainException(Exception):
    """Exceção base para erros de domínio."""

    status_code: int = 500
    error_code: str = "InternalServerError"

    def __init__(self, message: str = "An unexpected error occurred"):
        self.message = message
        super().__init__(message)


class ValidationError(DomainException):
    """Entrada ausente ou inválida."""

    status_code = 400
    error_code = "ValidationError"


class TranscriptNotFoundError(DomainException):
    """Upstream não possui transcrição para o vídeo."""

    status_code = 404
    error_code = "CaptionsNotAvailable"

    def __init__(self, video_id: str, reason: str = "Transcript not found"):
        self.video_id = video_id
        self.reason = reason
        super().__init__("Captions not available for this video.")


class ThrottledError(DomainException):
    """Requisição rejeitada por quota excedida ou falha recente em cache."""

    status_code = 429
    error_code = "TooManyRequests"

    def __init__(
        self,
        retry_after: int,
        message: str = "Too many requests, please try again later."
    ):
        self.retry_after = int(retry_after)
        super().__init__(message)


class InternalError(DomainException):
    """Falha inesperada no upstream ou no próprio serviço."""

    status_code = 500
    error_code = "InternalServerError"
