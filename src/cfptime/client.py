from __future__ import annotations

from typing import Any, Optional, Union

from . import core
from .config import ClientConfig
from .transport import AsyncTransport, SyncTransport

Transport = Union[SyncTransport, AsyncTransport]


class CfpTime:
    """Client for the CFPTime API.

    The methods return whatever the transport's ``fetch`` returns: plain
    values with a SyncTransport (the default), awaitables with an
    AsyncTransport::

        with CfpTime() as api:
            confs = api.list_cfps()

        async with CfpTime(transport=AsyncTransport()) as api:
            confs = await api.list_cfps()

    Failures raise subclasses of ``cfptime.errors.CfpTimeError``.
    """

    def __init__(self, cfg: Optional[ClientConfig] = None, *, transport: Optional[Transport] = None):
        if cfg is not None and transport is not None:
            raise TypeError("pass either cfg or transport; a transport carries its own config")
        self._t = transport if transport is not None else SyncTransport(cfg)

    @property
    def transport(self) -> Transport:
        return self._t

    def list_cfps(self) -> Any:
        """Conferences currently accepting proposals, in server order."""
        return self._t.fetch(core.CFPS)

    def get_cfp(self, cfp_id: int) -> Any:
        return self._t.fetch(core.cfp(cfp_id))

    def list_upcoming(self) -> Any:
        return self._t.fetch(core.UPCOMING)

    def list_confs(self) -> Any:
        return self._t.fetch(core.CONFS)

    def get_conf(self, conf_id: int) -> Any:
        return self._t.fetch(core.conf(conf_id))

    def close(self) -> None:
        if isinstance(self._t, AsyncTransport):
            raise TypeError("use 'await aclose()' with an async transport")
        self._t.close()

    async def aclose(self) -> None:
        if isinstance(self._t, AsyncTransport):
            await self._t.aclose()
        else:
            self._t.close()

    def __enter__(self) -> "CfpTime":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    async def __aenter__(self) -> "CfpTime":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()
