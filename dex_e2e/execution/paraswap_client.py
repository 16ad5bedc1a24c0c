"""
ParaSwap Routing API Client

Prices a swap restricted to a single DEX and contract method, then builds
the Augustus transaction for it. Pricing itself happens server side; this
client only shapes requests and surfaces failures as RouteError.
"""

import logging
from typing import Any, Dict, Optional

import httpx

from dex_e2e.config import settings
from dex_e2e.constants import ContractMethod, Network, SwapSide
from dex_e2e.exceptions import RouteError
from dex_e2e.models import Token, TransferFeeParams

logger = logging.getLogger(__name__)


class ParaSwapClient:
    """Thin async wrapper around the /prices and /transactions endpoints"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        api_version: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.base_url = (base_url or settings.paraswap_api_url).rstrip("/")
        self.api_version = api_version or settings.paraswap_api_version
        self.timeout = timeout if timeout is not None else settings.paraswap_api_timeout

    async def _request(
        self,
        method: str,
        endpoint: str,
        params: Optional[Dict[str, Any]] = None,
        data: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        url = f"{self.base_url}{endpoint}"

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                if method == "GET":
                    response = await client.get(url, params=params)
                elif method == "POST":
                    response = await client.post(url, params=params, json=data)
                else:
                    raise ValueError(f"Unsupported method: {method}")

                response.raise_for_status()
            except httpx.HTTPStatusError as e:
                status = e.response.status_code
                raise RouteError(f"{endpoint} failed ({status}): {_error_message(e.response)}", status_code=status)
            except httpx.RequestError as e:
                raise RouteError(f"{endpoint} request failed: {e}")

            return response.json()

    async def get_price_route(
        self,
        src_token: Token,
        dest_token: Token,
        amount: str,
        side: SwapSide,
        network: Network,
        dex_key: str,
        contract_method: ContractMethod,
        transfer_fees: Optional[TransferFeeParams] = None,
        user_address: Optional[str] = None,
        options: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Price a swap through one DEX and one contract method.

        Args:
            amount: Raw amount, source-denominated for SELL and
                destination-denominated for BUY
            transfer_fees: Fee-on-transfer hints forwarded to the pricer
            options: Extra query parameters, applied last

        Returns:
            The priceRoute object

        Raises:
            RouteError: If the API rejects the request or returns no route
        """
        params: Dict[str, Any] = {
            "srcToken": src_token.address,
            "srcDecimals": src_token.decimals,
            "destToken": dest_token.address,
            "destDecimals": dest_token.decimals,
            "amount": amount,
            "side": str(side),
            "network": int(network),
            "includeDEXS": dex_key,
            "includeContractMethods": str(contract_method),
            "version": self.api_version,
        }
        if user_address:
            params["userAddress"] = user_address
        if transfer_fees is not None:
            params.update(_transfer_fee_params(transfer_fees))
        if options:
            params.update(options)

        result = await self._request("GET", "/prices", params=params)
        price_route = result.get("priceRoute")
        if not price_route:
            raise RouteError(f"No price route for {src_token.symbol} -> {dest_token.symbol} on {dex_key}: {result.get('error', 'empty response')}")

        logger.info(
            f"Price route: {dex_key} {side} {src_token.symbol} -> {dest_token.symbol} "
            f"src={price_route.get('srcAmount')} dest={price_route.get('destAmount')} "
            f"method={price_route.get('contractMethod')}"
        )
        return price_route

    async def build_transaction(
        self,
        network: Network,
        price_route: Dict[str, Any],
        user_address: str,
        slippage_bps: Optional[int] = None,
    ) -> Dict[str, Any]:
        """
        Build the Augustus transaction for a price route.

        Returns:
            Transaction params (from, to, value, data, ...)
        """
        if slippage_bps is None:
            slippage_bps = settings.swap_slippage_bps

        data: Dict[str, Any] = {
            "srcToken": price_route["srcToken"],
            "srcDecimals": price_route["srcDecimals"],
            "destToken": price_route["destToken"],
            "destDecimals": price_route["destDecimals"],
            "priceRoute": price_route,
            "userAddress": user_address,
            "slippage": slippage_bps,
        }
        if price_route.get("side") == SwapSide.BUY.value:
            data["destAmount"] = price_route["destAmount"]
        else:
            data["srcAmount"] = price_route["srcAmount"]

        # Balances and allowances are set up on the fork after building
        params = {"ignoreChecks": "true", "ignoreGasEstimate": "true"}

        return await self._request("POST", f"/transactions/{int(network)}", params=params, data=data)


def _transfer_fee_params(transfer_fees: TransferFeeParams) -> Dict[str, int]:
    """Only non-zero fees are sent; the API treats missing as zero"""
    mapping = {
        "srcTokenTransferFee": transfer_fees.src_fee,
        "destTokenTransferFee": transfer_fees.dest_fee,
        "srcTokenDexTransferFee": transfer_fees.src_dex_fee,
        "destTokenDexTransferFee": transfer_fees.dest_dex_fee,
    }
    return {key: value for key, value in mapping.items() if value}


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict) and "error" in body:
        return str(body["error"])
    return response.text
