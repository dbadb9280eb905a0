"""Resources: one class per group of business operations.

Each operation converts the request, sends it and decodes the response.
"""

from pagseguro.adapters.resources.authorizations import AuthorizationsResource
from pagseguro.adapters.resources.pre_approvals import PreApprovalsResource

__all__ = ["AuthorizationsResource", "PreApprovalsResource"]
