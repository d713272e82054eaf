"""Acting-subject dependency.

Guarded operations (grant, revoke, deletes, tenant creation) act on behalf
of the subject named in the ``X-Subject-Id`` header. The header is taken
at face value; authenticating it is left to whatever sits in front of
the service. Parsing happens in the services, so a malformed id yields
the usual 400 Problem Details.

Usage:
    @router.delete("/users/{user_id}")
    async def delete_user(
        user_id: str,
        acting_subject: str = Depends(get_acting_subject),
    ):
        ...
"""

from typing import Annotated

from fastapi import Header, HTTPException, status

SUBJECT_HEADER = "X-Subject-Id"


async def get_acting_subject(
    x_subject_id: Annotated[str | None, Header(alias=SUBJECT_HEADER)] = None,
) -> str:
    """Return the acting subject id from the request headers.

    Raises:
        HTTPException: 401 if the header is missing or blank.
    """
    if x_subject_id is None or not x_subject_id.strip():
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"{SUBJECT_HEADER} header is required",
        )
    return x_subject_id.strip()
