from .validate import validate_methods
