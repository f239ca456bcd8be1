from typing import Any, List, Optional

def include_hidden_rows(current_user: Optional[Any], requested: bool) -> bool:
    """
    Hidden rows are only listed when the caller asked for them and is
    logged in; anonymous visitors never see them.
    """
    return bool(requested and current_user is not None)

def filter_hidden(items: List[Any], include_hidden: bool) -> List[Any]:
    if include_hidden:
        return items
    return [item for item in items if not item.hidden]
