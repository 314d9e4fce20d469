"""Assembly of the form fields returned to the uploading client."""

from .models import DateParts, PolicyOptions, ResultFields
from .signing import AWS_ALGORITHM, credential_scope


def assemble_fields(
    encoded_policy: str,
    signature: str,
    options: PolicyOptions,
    date_parts: DateParts,
) -> ResultFields:
    """
    Build the form fields to embed next to the file input.

    Content-Type is left out when options.content_type is None. The file
    field itself is the caller's to add.
    """
    fields: ResultFields = {
        "key": options.key,
        "acl": options.acl,
        "success_action_status": options.success_action_status,
    }
    if options.content_type is not None:
        fields["Content-Type"] = options.content_type
    fields["X-Amz-Credential"] = credential_scope(
        options.access_key, date_parts.yymmdd, options.region
    )
    fields["X-Amz-Algorithm"] = AWS_ALGORITHM
    fields["X-Amz-Date"] = date_parts.amz_date
    fields["Policy"] = encoded_policy
    fields["X-Amz-Signature"] = signature
    return fields
