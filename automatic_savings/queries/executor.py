"""
Query Execution Engine

Read-only queries against the ledger view. Queries never touch contract
state and never produce transfer instructions.
"""

from automatic_savings.contract.errors import infrastructure_errors
from automatic_savings.models.messages import BalanceResponse, Env, QueryMsg
from automatic_savings.services.bank import BalanceQuerierInterface


class QueryExecutor:
    """
    Executes query messages against the bank.

    GUARANTEES:
    - Only returns what the ledger reports
    - Never filters, sums or converts balances
    """

    def __init__(self, bank: BalanceQuerierInterface):
        self._bank = bank

    def execute(self, env: Env, query: QueryMsg) -> BalanceResponse:
        """Route a decoded query message to its handler."""
        if query.get_balance is not None:
            return self.get_balance(env.contract_address)
        raise ValueError(f"Unsupported query: {query.model_dump(exclude_none=True)}")

    def get_balance(self, contract_address: str) -> BalanceResponse:
        """Full balance held by the contract."""
        with infrastructure_errors():
            balance = self._bank.query_all_balances(contract_address)
        return BalanceResponse(balance=balance)
