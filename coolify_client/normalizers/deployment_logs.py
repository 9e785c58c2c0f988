# coolify_client/normalizers/deployment_logs.py

import json
from typing import Optional


NO_LOGS = "No logs available."


def parse_deployment_logs(raw: Optional[str]) -> str:
    """
    Render the ``logs`` field of a deployment as plain text.

    The field is normally a JSON-encoded array of ``{output, type, hidden}``
    entries. Anything else (plain text, a JSON object) is returned as-is.
    Hidden entries are kept.
    """
    if not raw:
        return NO_LOGS

    try:
        entries = json.loads(raw)
    except ValueError:
        return raw

    if not isinstance(entries, list):
        return raw

    lines = [
        entry["output"]
        for entry in entries
        if isinstance(entry, dict) and entry.get("output")
    ]
    if not lines:
        return NO_LOGS

    return "\n".join(str(line) for line in lines)
