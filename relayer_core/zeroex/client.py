from __future__ import annotations

import asyncio
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from relayer_core.decimals import to_amount, to_decimal
from relayer_core.ethereum.addresses import normalize_address
from relayer_core.ethereum.client import EthereumClient, Web3EthereumClient
from relayer_core.exceptions import NoFillableOrdersError
from relayer_core.logs.structlog import logger
from relayer_core.logs.timing import timed
from relayer_core.persistence.cache import Cache, MemoryCache, create_cache, read_through
from relayer_core.zeroex.config import ClientConfig
from relayer_core.zeroex.constants import (
    ADDRESS_CACHE_TTL,
    EXCHANGE_ADDRESS_CACHE_KEY,
    FILLED_AMOUNT_CACHE_TTL,
    FILLED_TAKER_AMOUNT_CACHE_KEY,
    WETH_MAINNET_ADDRESS,
    WETH_TOKEN_ADDRESS_CACHE_KEY,
    ZRX_TOKEN_ADDRESS_CACHE_KEY,
)
from relayer_core.zeroex.models import SignerType, TxOptions
from relayer_core.zeroex.wrappers import ContractWrappers, ContractWrappersFactory, SignatureUtils

Order = Mapping[str, Any]


class ZeroExClient:
    """
    Facade over the 0x v2 protocol bindings.

    Every call builds fresh contract wrappers for the current provider and
    network, forwards its arguments with amounts coerced to Decimal and the
    account address normalized, and returns whatever the bindings return.
    Binding errors propagate unchanged, except inside the two order filters
    where they only mark an order as not fillable.
    """

    ethereum_client: EthereumClient
    options: TxOptions
    cache: Cache

    def __init__(
        self,
        ethereum_client: EthereumClient,
        options: TxOptions | None = None,
        *,
        contract_wrappers_factory: ContractWrappersFactory,
        signature_utils: SignatureUtils,
        cache: Cache | None = None,
    ) -> None:
        self.ethereum_client = ethereum_client
        self.options = options or TxOptions()
        self.contract_wrappers_factory = contract_wrappers_factory
        self.signature_utils = signature_utils
        self.cache = cache if cache is not None else MemoryCache()
        self.logger = logger.bind(component=self.__class__.__name__)

    async def _get_account(self) -> str:
        return normalize_address(await self.ethereum_client.get_account())

    def _raise_if_empty(self, orders: Sequence[Order]) -> None:
        if not orders:
            self.logger.warning("no fillable orders left after filtering")
            raise NoFillableOrdersError()

    async def filter_fillable_orders(self, orders: Sequence[Order]) -> list[Order]:
        """Keep the orders the exchange currently accepts as fillable, in input order."""
        wrappers = await self.get_contract_wrappers()

        async def is_fillable(order: Order) -> bool:
            try:
                await wrappers.exchange.validate_order_fillable_or_throw(order)
                return True
            except Exception as e:
                self.logger.debug("order is not fillable", order_hash=order.get("orderHash"), error=str(e))
                return False

        statuses = await asyncio.gather(*(is_fillable(order) for order in orders))
        return [order for order, fillable in zip(orders, statuses) if fillable]

    async def filter_test_order_fill(
        self, orders: Sequence[Order], amount: Decimal | int | str, account: str
    ) -> list[Order]:
        """Keep the orders a fill of amount by account would succeed against, in input order."""
        wrappers = await self.get_contract_wrappers()
        fill_amount = to_amount(amount)
        taker = normalize_address(account)

        async def can_fill(order: Order) -> bool:
            try:
                await wrappers.exchange.validate_fill_order_throw_if_invalid(order, fill_amount, taker)
                return True
            except Exception as e:
                self.logger.debug("order fill would fail", order_hash=order.get("orderHash"), error=str(e))
                return False

        statuses = await asyncio.gather(*(can_fill(order) for order in orders))
        return [order for order, fillable in zip(orders, statuses) if fillable]

    async def get_contract_wrappers(self) -> ContractWrappers:
        provider = self.ethereum_client.get_current_provider()
        network_id = await self.ethereum_client.get_network_id()
        return self.contract_wrappers_factory(provider, network_id)

    @timed
    async def get_exchange_contract_address(self) -> str:
        async def load() -> str:
            wrappers = await self.get_contract_wrappers()
            return wrappers.exchange.get_contract_address()

        return await read_through(self.cache, EXCHANGE_ADDRESS_CACHE_KEY, ADDRESS_CACHE_TTL, load)

    @timed
    async def get_zrx_token_address(self) -> str:
        async def load() -> str:
            wrappers = await self.get_contract_wrappers()
            return wrappers.exchange.get_zrx_token_address()

        return await read_through(self.cache, ZRX_TOKEN_ADDRESS_CACHE_KEY, ADDRESS_CACHE_TTL, load)

    @timed
    async def get_weth_token_address(self) -> str:
        async def load() -> str:
            wrappers = await self.get_contract_wrappers()
            return wrappers.ether_token.get_contract_address_if_exists() or WETH_MAINNET_ADDRESS

        return await read_through(self.cache, WETH_TOKEN_ADDRESS_CACHE_KEY, ADDRESS_CACHE_TTL, load)

    @timed
    async def get_filled_taker_amount(self, order_hash: str) -> Decimal:
        async def load() -> str:
            wrappers = await self.get_contract_wrappers()
            # cached as a string so every cache serializer can store it
            return str(await wrappers.exchange.get_filled_taker_asset_amount(order_hash))

        key = FILLED_TAKER_AMOUNT_CACHE_KEY.format(order_hash)
        return to_decimal(await read_through(self.cache, key, FILLED_AMOUNT_CACHE_TTL, load))

    @timed
    async def sign_order_hash(self, order_hash: str) -> str:
        account = await self._get_account()
        return await self.signature_utils.ec_sign_order_hash(
            self.ethereum_client.get_current_provider(),
            order_hash,
            account,
            SignerType.METAMASK,
        )

    @timed
    async def deposit_ether(self, amount: Decimal | int | str) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        weth_address = await self.get_weth_token_address()
        return await wrappers.ether_token.deposit(weth_address, to_amount(amount), account)

    @timed
    async def withdraw_ether(self, amount: Decimal | int | str) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        weth_address = await self.get_weth_token_address()
        return await wrappers.ether_token.withdraw(weth_address, to_amount(amount), account)

    @timed
    async def fill_or_kill_order(self, order: Order, amount: Decimal | int | str) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        return await wrappers.exchange.fill_or_kill_order(
            order,
            to_amount(amount),
            account,
            **self.options.as_params(should_validate=False),
        )

    @timed
    async def fill_or_kill_orders(
        self, orders: Sequence[Order], amounts: Sequence[Decimal | int | str]
    ) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        return await wrappers.exchange.batch_fill_or_kill_orders(
            orders,
            [to_amount(amount) for amount in amounts],
            account,
            **self.options.as_params(should_validate=False),
        )

    @timed
    async def cancel_order(self, order: Order) -> str:
        wrappers = await self.get_contract_wrappers()
        return await wrappers.exchange.cancel_order(order, **self.options.as_params(should_validate=False))

    @timed
    async def market_buy(self, orders: Sequence[Order], amount: Decimal | int | str) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        fillable_orders = await self.filter_test_order_fill(
            await self.filter_fillable_orders(orders), amount, account
        )
        self._raise_if_empty(fillable_orders)

        self.logger.info(f"market buy against {len(fillable_orders)}/{len(orders)} orders", amount=str(amount))
        return await wrappers.exchange.market_buy_orders(
            fillable_orders,
            to_amount(amount),
            account,
            **self.options.as_params(),
        )

    @timed
    async def market_sell(self, orders: Sequence[Order], amount: Decimal | int | str) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        fillable_orders = await self.filter_test_order_fill(
            await self.filter_fillable_orders(orders), amount, account
        )
        self._raise_if_empty(fillable_orders)

        self.logger.info(f"market sell against {len(fillable_orders)}/{len(orders)} orders", amount=str(amount))
        return await wrappers.exchange.market_sell_orders(
            fillable_orders,
            to_amount(amount),
            account,
            **self.options.as_params(),
        )

    @timed
    async def market_buy_with_eth(
        self,
        orders: Sequence[Order],
        fee_orders: Sequence[Order],
        fee_percentage: Any,
        fee_recipient: str,
        maker_amount: Decimal | int | str,
        eth_amount: Decimal | int | str,
    ) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        fillable_orders, fillable_fee_orders = await asyncio.gather(
            self.filter_fillable_orders(orders),
            self.filter_fillable_orders(fee_orders),
        )
        self._raise_if_empty(fillable_orders)

        return await wrappers.forwarder.market_buy_orders_with_eth(
            fillable_orders,
            to_amount(maker_amount),
            account,
            to_amount(eth_amount),
            fillable_fee_orders,
            fee_percentage,
            fee_recipient,
            **self.options.as_params(),
        )

    @timed
    async def market_sell_eth(
        self,
        orders: Sequence[Order],
        fee_orders: Sequence[Order],
        fee_percentage: Any,
        fee_recipient: str,
        amount: Decimal | int | str,
    ) -> str:
        wrappers = await self.get_contract_wrappers()
        account = await self._get_account()
        return await wrappers.forwarder.market_sell_orders_with_eth(
            orders,
            account,
            to_amount(amount),
            fee_orders,
            fee_percentage,
            fee_recipient,
            **self.options.as_params(),
        )


class ZeroExClientFactory:
    @staticmethod
    def from_config(
        config: ClientConfig,
        contract_wrappers_factory: ContractWrappersFactory,
        signature_utils: SignatureUtils,
    ) -> ZeroExClient:
        ethereum_client = Web3EthereumClient.from_rpc_url(config.rpc_url, default_account=config.account)
        cache = create_cache(config.cache)
        logger.info(f"0x client configured for {config.rpc_url} with {config.cache.type} cache")
        return ZeroExClient(
            ethereum_client,
            config.tx_options,
            contract_wrappers_factory=contract_wrappers_factory,
            signature_utils=signature_utils,
            cache=cache,
        )
