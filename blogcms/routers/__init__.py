from fastapi import HTTPException

from blogcms.result import Result


def unwrap(result: Result):
    """
    Return the value of a successful result, or raise the matching HTTP error.

    Messages reporting a missing entity map to 404; every other failure
    (rejected input, rule violations, store faults) maps to 400.
    """
    if result.is_success:
        return result.value
    status = 404 if "not found" in result.error.lower() else 400
    raise HTTPException(status_code=status, detail=result.error)
