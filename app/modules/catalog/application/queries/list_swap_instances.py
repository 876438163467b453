# 📄 File: app/modules/catalog/application/queries/list_swap_instances.py
# 🧭 Purpose (Layman Explanation):
# The swap page question: "which plants are up for trade?"
# 🧪 Purpose (Technical Summary):
# CQRS query for instances flagged for_swap, newest first.
# 🔗 Dependencies:
# pydantic
# 🔄 Connected Modules / Calls From:
# ListSwapInstancesQueryHandler, GET /swap

from pydantic import BaseModel


class ListSwapInstancesQuery(BaseModel):
    """The swap list takes no parameters."""
