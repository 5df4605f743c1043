"""
Method Dispatcher - exercise every declared contract method in order.

View methods go through the unsigned view path; call methods go through
the retrying transaction submitter. A failure in one method is reported
and the run moves on to the next one.
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Iterable, Optional

from ..config.models import ContractInterface, MethodSpec
from ..errors import Ocs01Error
from ..pneuma.rpc import RpcClient
from ..pneuma.tx import TransactionSubmitter
from ..pneuma.view import call_view
from .params import ParamGenerator, RandomParamGenerator, generate_params
from .report import ERROR, OK, SKIPPED, MethodOutcome, Reporter

logger = logging.getLogger(__name__)

METHOD_DELAY = 2.0


class Dispatcher:
    def __init__(
        self,
        interface: ContractInterface,
        client: RpcClient,
        rpc_url: str,
        caller: str,
        submitter: TransactionSubmitter,
        *,
        generator: Optional[ParamGenerator] = None,
        reporters: Iterable[Reporter] = (),
        delay: float = METHOD_DELAY,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self.interface = interface
        self.client = client
        self.rpc_url = rpc_url
        self.caller = caller
        self.submitter = submitter
        self.generator = generator or RandomParamGenerator()
        self.reporters = list(reporters)
        self.delay = delay
        self._sleep = sleep

    def run(self) -> list[MethodOutcome]:
        """Dispatch every method in declaration order, pausing between them."""
        outcomes = []
        for method in self.interface.methods:
            for reporter in self.reporters:
                reporter.method_started(method)
            outcome = self.dispatch(method)
            for reporter in self.reporters:
                reporter.method_finished(outcome)
            outcomes.append(outcome)
            self._sleep(self.delay)
        return outcomes

    def dispatch(self, method: MethodSpec) -> MethodOutcome:
        params = generate_params(self.generator, method.params)

        if method.is_view:
            invoke = self._view
        elif method.is_call:
            invoke = self._call
        else:
            logger.warning("Skipping %s: unknown method type %r", method.name, method.kind)
            return MethodOutcome(method=method, params=params, status=SKIPPED)

        try:
            result = invoke(method, params)
        except Ocs01Error as exc:
            logger.info("%s failed: %s", method.name, exc)
            return MethodOutcome(method=method, params=params, status=ERROR, error=exc)
        return MethodOutcome(method=method, params=params, status=OK, result=result)

    def _view(self, method: MethodSpec, params: tuple[str, ...]) -> str:
        return call_view(
            self.client,
            self.rpc_url,
            self.interface.contract,
            method.name,
            params,
            self.caller,
        )

    def _call(self, method: MethodSpec, params: tuple[str, ...]) -> str:
        return self.submitter.submit(self.interface.contract, method.name, params)
