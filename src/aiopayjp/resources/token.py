r"""Token resource.

A token is a single-use reference to card details. Tokens are created
with the public key so raw card numbers never reach the merchant
server, then passed to charges or customers in place of the card.
"""

from __future__ import annotations

__all__ = [
    "CardDetails",
    "CreateTokenParams",
    "PublicTokenService",
    "Token",
    "TokenService",
]

from pydantic import Field

from aiopayjp.params import Params
from aiopayjp.resources.base import BaseService, quote_id
from aiopayjp.resources.card import Card
from aiopayjp.response import PayjpObject


class Token(PayjpObject):
    id: str
    object: str = "token"
    livemode: bool = False
    created: int
    used: bool
    card: Card


class CardDetails(Params):
    r"""Raw card details.

    Args:
        number: The card number.
        exp_month: Expiry month (1 to 12).
        exp_year: Expiry year, four digits.
        cvc: The security code.
        name: The card holder name.
    """

    number: str
    exp_month: int = Field(ge=1, le=12)
    exp_year: int
    cvc: str
    name: str | None = None
    address_line1: str | None = None
    address_line2: str | None = None
    address_city: str | None = None
    address_state: str | None = None
    address_zip: str | None = None
    country: str | None = None
    email: str | None = None
    phone: str | None = None


class CreateTokenParams(Params):
    r"""Parameters for creating a token.

    The card details are sent in bracket notation.

    Example:
        ```pycon
        >>> from aiopayjp.encoding import flatten_params
        >>> from aiopayjp.resources.token import CardDetails, CreateTokenParams
        >>> params = CreateTokenParams(
        ...     card=CardDetails(number="4242424242424242", exp_month=12, exp_year=2030, cvc="123")
        ... )
        >>> flatten_params(params)[0]
        ('card[number]', '4242424242424242')

        ```
    """

    card: CardDetails | None = None


class PublicTokenService(BaseService):
    """Token operations available with a public key."""

    async def create(self, params: CreateTokenParams) -> Token:
        """Create a token from card details.

        Example:
            ```pycon
            >>> from aiopayjp.resources.token import CardDetails, CreateTokenParams
            >>> token = await public_client.tokens.create(  # doctest: +SKIP
            ...     CreateTokenParams(
            ...         card=CardDetails(
            ...             number="4242424242424242", exp_month=12, exp_year=2030, cvc="123"
            ...         )
            ...     )
            ... )

            ```
        """
        return await self._client.post("/tokens", params, Token)


class TokenService(PublicTokenService):
    """Token operations available with a secret key."""

    async def retrieve(self, token_id: str) -> Token:
        return await self._client.get(f"/tokens/{quote_id(token_id)}", Token)

    async def tds_finish(self, token_id: str) -> Token:
        """Complete the token once the customer finished 3D Secure."""
        return await self._client.post(f"/tokens/{quote_id(token_id)}/tds_finish", {}, Token)
