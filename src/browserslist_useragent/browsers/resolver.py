"""Support-policy resolution through the browserslist command-line tool.

browserslist itself is a Node.js package; this module runs its CLI and reads
the JSON result. Failures are configuration errors and raise
QueryResolutionError rather than being folded into a "no match".
"""

from __future__ import annotations

import json
import logging
import os
import shlex
import subprocess
from typing import List, Optional, Sequence

from ..common.logging_utils import Timer, extra_context, is_debug_enabled
from ..constants import Constants
from ..errors import QueryResolutionError

logger = logging.getLogger(__name__)


def _command_from_env() -> Optional[List[str]]:
    raw = os.environ.get(Constants.ENV_BROWSERSLIST_COMMAND)
    if raw and raw.strip():
        return shlex.split(raw)
    return None


def _timeout_from_env() -> Optional[float]:
    raw = os.environ.get(Constants.ENV_BROWSERSLIST_TIMEOUT)
    if not raw or not raw.strip():
        return Constants.BROWSERSLIST_TIMEOUT
    try:
        return float(raw)
    except ValueError:
        logger.warning("Ignoring invalid %s=%r", Constants.ENV_BROWSERSLIST_TIMEOUT, raw)
        return Constants.BROWSERSLIST_TIMEOUT


class BrowserslistResolver:
    """Expands browserslist queries into "name version" strings.

    Any callable with the signature ``(queries, env, path) -> list[str]`` can
    stand in for this class when matching.
    """

    def __init__(self, command: Optional[Sequence[str]] = None, timeout: Optional[float] = None):
        """Initialize the resolver.

        Args:
            command: browserslist executable and leading arguments. Defaults
                to BROWSERSLIST_UA_COMMAND, then ``npx browserslist``.
            timeout: Seconds to wait for the tool. Defaults to
                BROWSERSLIST_UA_TIMEOUT, then no timeout.
        """
        self.command = list(command or _command_from_env() or Constants.BROWSERSLIST_COMMAND)
        self.timeout = timeout if timeout is not None else _timeout_from_env()

    def build_args(self, queries: Optional[Sequence[str]], env: Optional[str]) -> List[str]:
        """Build the argument vector for one invocation."""
        args = self.command + ["--json"]
        if env:
            args.append(f"--env={env}")
        if queries is not None:
            args.append(Constants.QUERY_SEPARATOR.join(queries))
        return args

    def resolve(self, queries: Optional[Sequence[str]], env: Optional[str], path: str) -> List[str]:
        """Run browserslist and return its browser list.

        Args:
            queries: Queries to expand; None reads the project config at path.
            env: browserslist environment section, if any.
            path: Directory browserslist resolves its config from.

        Returns:
            List of "name version" or "name start-end" strings.

        Raises:
            QueryResolutionError: the tool is missing, fails or prints garbage.
        """
        if queries is not None and len(queries) == 0:
            return []
        if not os.path.isdir(path):
            raise QueryResolutionError(f"browserslist path is not a directory: {path}")

        args = self.build_args(queries, env)
        with Timer() as t:
            try:
                completed = subprocess.run(
                    args,
                    cwd=path,
                    capture_output=True,
                    text=True,
                    timeout=self.timeout,
                    check=False,
                )
            except FileNotFoundError as exc:
                raise QueryResolutionError(
                    f"browserslist executable not found: {args[0]}", command=args
                ) from exc
            except subprocess.TimeoutExpired as exc:
                raise QueryResolutionError(
                    f"browserslist timed out after {self.timeout} seconds", command=args
                ) from exc

        if is_debug_enabled(logger):
            logger.debug(
                "browserslist finished",
                extra=extra_context(
                    event="browserslist_run",
                    component="browsers.resolver",
                    returncode=completed.returncode,
                    duration_ms=t.duration_ms(),
                    env=env,
                    cwd=path,
                ),
            )

        if completed.returncode != 0:
            stderr = (completed.stderr or "").strip()
            raise QueryResolutionError(
                f"browserslist failed: {stderr or 'exit code ' + str(completed.returncode)}",
                command=args,
                returncode=completed.returncode,
                stderr=stderr,
            )

        return self._parse_output(completed.stdout, args)

    __call__ = resolve

    @staticmethod
    def _parse_output(stdout: str, args: List[str]) -> List[str]:
        try:
            data = json.loads(stdout)
        except (TypeError, ValueError) as exc:
            raise QueryResolutionError("browserslist printed invalid JSON", command=args) from exc

        browsers = data.get("browsers") if isinstance(data, dict) else data
        if not isinstance(browsers, list) or not all(isinstance(b, str) for b in browsers):
            raise QueryResolutionError("browserslist output has no browser list", command=args)
        return browsers
