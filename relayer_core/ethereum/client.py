from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from web3 import AsyncHTTPProvider, AsyncWeb3

from relayer_core.ethereum.addresses import normalize_address
from relayer_core.exceptions import AccountUnavailableError
from relayer_core.logs.structlog import logger


@runtime_checkable
class EthereumClient(Protocol):
    """Connection to an Ethereum node and the account acting on it."""

    def get_current_provider(self) -> Any: ...

    async def get_network_id(self) -> int: ...

    async def get_account(self) -> str: ...


class Web3EthereumClient:
    """EthereumClient backed by an async web3 instance."""

    def __init__(self, web3: AsyncWeb3, default_account: str | None = None) -> None:
        self.web3 = web3
        self.default_account = normalize_address(default_account) if default_account else None
        self.logger = logger.bind(component=self.__class__.__name__)

    @classmethod
    def from_rpc_url(cls, rpc_url: str, default_account: str | None = None) -> "Web3EthereumClient":
        return cls(AsyncWeb3(AsyncHTTPProvider(rpc_url)), default_account=default_account)

    def get_current_provider(self) -> Any:
        return self.web3.provider

    async def get_network_id(self) -> int:
        version = await self.web3.net.version
        return int(version)

    async def get_account(self) -> str:
        if self.default_account is not None:
            return self.default_account

        accounts = await self.web3.eth.accounts
        if not accounts:
            raise AccountUnavailableError("No account is unlocked on the current provider")
        account = normalize_address(accounts[0])
        self.logger.debug(f"using node account {account}")
        return account
