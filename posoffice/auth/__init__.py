# posoffice/auth/__init__.py
from .tokens import issue_token, read_token, bearer_token, token_required  # noqa: F401
