# apps/api/responses.py
from rest_framework import status
from rest_framework.response import Response


def error_response(message, errors=None, status_code=status.HTTP_400_BAD_REQUEST):
    """Body used by the endpoints that orchestrate imports, AI calls and PDFs."""
    return Response(
        {"success": False, "message": message, "errors": errors or [message]},
        status=status_code
    )
