"""Helper methods for appear.

appear.common
~~~~~~~~~~~~~

"""

from __future__ import annotations

import logging
import subprocess
import typing as t

from . import exc

if t.TYPE_CHECKING:
    from collections.abc import Sequence

logger = logging.getLogger(__name__)


class SubprocessRunner:
    """Run a command through :py:mod:`subprocess` and return its stdout.

    One child per call: spawned, drained and reaped before :meth:`run`
    returns. Standard input is not connected.

    Examples
    --------
    >>> runner = SubprocessRunner()
    >>> runner.run(["printf", "session:main id:$1"])
    'session:main id:$1'

    >>> runner.run(["false"])
    Traceback (most recent call last):
        ...
    appear.exc.CommandFailed: false exited with status 1

    >>> runner.run(["appear-no-such-binary"])
    Traceback (most recent call last):
        ...
    appear.exc.SpawnError: Could not launch appear-no-such-binary: ...
    """

    def run(self, argv: Sequence[str]) -> str:
        """Execute ``argv``, returning captured standard output."""
        cmd = [str(c) for c in argv]

        try:
            process = subprocess.Popen(
                cmd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="backslashreplace",
            )
        except OSError as e:
            logger.exception(f"Exception for {subprocess.list2cmdline(cmd)}")
            raise exc.SpawnError(cmd, e.strerror or str(e)) from e

        stdout, stderr = process.communicate()
        returncode = process.returncode

        logger.debug(
            "stdout for {cmd}: {stdout}".format(
                cmd=" ".join(cmd),
                stdout=stdout.splitlines(),
            ),
        )

        if returncode != 0:
            raise exc.CommandFailed(cmd, returncode, stderr)

        return stdout
