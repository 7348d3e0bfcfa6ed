class DocumentServiceError(Exception):
    """Base for errors that end a request with a {code, message} body."""
    code: int = 500
    message: str = "Internal error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)
        self.message = message or self.message

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message}


class DocumentValidationError(DocumentServiceError):
    code = 400
    message = "Error while creating the document!"


class DocumentNotFound(DocumentServiceError):
    code = 404
    message = "Document not found!"


class NoDocumentsInCorpus(DocumentServiceError):
    code = 404
    message = "No documents found!"
