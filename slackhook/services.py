import logging
import threading
from typing import Callable, Optional

import requests

from .constants import DEBUG_MODE
from .models import OutboundMessage

logger = logging.getLogger(__name__)


class SlackHookError(Exception):
    pass


class DispatchError(SlackHookError):
    """Falha ao entregar a mensagem ao webhook (URL ausente, rede ou resposta não-2xx)."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class SlackClient:
    """Cliente do incoming webhook. Cada hook tem a sua instância."""

    def __init__(self, webhook_url: str, timeout: Optional[float] = None):
        self.webhook_url = webhook_url
        self.timeout = timeout

    def send(self, message: OutboundMessage) -> requests.Response:
        if not self.webhook_url:
            raise DispatchError("webhook URL não configurada")

        payload = message.to_payload()
        try:
            resp = requests.post(self.webhook_url, json=payload, timeout=self.timeout)
        except requests.RequestException as exc:
            raise DispatchError(f"falha ao enviar para o webhook: {exc}") from exc

        if DEBUG_MODE:
            logger.debug(f"Slack response: {resp.status_code}")
        if not 200 <= resp.status_code < 300:
            raise DispatchError(
                f"webhook respondeu {resp.status_code}: {resp.text[:200]}",
                status_code=resp.status_code,
            )
        return resp


class Dispatcher:
    """
    Envia a mensagem de forma síncrona ou em uma thread destacada.

    No modo assíncrono o chamador nunca vê o resultado: não há join,
    cancelamento nem limite de threads simultâneas. Falhas vão para
    `on_async_error` quando configurado; caso contrário são descartadas.
    """

    def __init__(self, client: SlackClient, asynchronous: bool = False,
                 on_async_error: Optional[Callable[[Exception], None]] = None):
        self.client = client
        self.asynchronous = asynchronous
        self.on_async_error = on_async_error

    def dispatch(self, message: OutboundMessage) -> None:
        if self.asynchronous:
            worker = threading.Thread(target=self._send_detached, args=(message,), daemon=True)
            worker.start()
            return
        self.client.send(message)

    def _send_detached(self, message: OutboundMessage) -> None:
        try:
            self.client.send(message)
        except Exception as exc:
            if self.on_async_error is None:
                logger.debug(f"Envio assíncrono descartado: {exc}")
                return
            try:
                self.on_async_error(exc)
            except Exception as callback_exc:
                logger.debug(f"on_async_error falhou: {callback_exc}")
