from .security import DEFAULT_TOLERANCE, construct_event, generate_test_header, verify_signature

__all__ = ["DEFAULT_TOLERANCE", "construct_event", "generate_test_header", "verify_signature"]
