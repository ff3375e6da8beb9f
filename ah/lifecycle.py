from __future__ import annotations

import logging
import sys
from typing import Any

from ah.core.config import ProviderConfig
from ah.core.lookup import find_all_by_name, find_by_name
from ah.core.models import Instance, StateChange
from ah.output import render_table, render_transition

logger = logging.getLogger(__name__)


class LifecycleManager:
    """Runs the instance commands (ls, start, stop).

    Provider errors are not handled here; they propagate to the CLI entry
    point, which reports them and exits.

    Parameters
    ----------
    config : ProviderConfig
        Provider settings shared by the directory and control
    directory_factory : Any
        Callable building an InstanceDirectory from a ProviderConfig
    control_factory : Any
        Callable building an InstanceControl from a ProviderConfig
    log_and_print_error : Any
        Function to log and print errors to stderr
    """

    def __init__(
        self,
        config: ProviderConfig,
        directory_factory: Any,
        control_factory: Any,
        log_and_print_error: Any,
    ) -> None:
        self.config = config
        self.directory_factory = directory_factory
        self.control_factory = control_factory
        self.log_and_print_error = log_and_print_error

    def _find_instance(self, name: str) -> Instance:
        """Resolve ``name`` against a fresh listing.

        Parameters
        ----------
        name : str
            Value of the Name tag to look for

        Returns
        -------
        Instance
            First instance in provider order carrying the name. Exits with
            status 1 if no instance matches
        """
        instances = self.directory_factory(self.config).list()
        target = find_by_name(instances, name)

        if target is None:
            self.log_and_print_error("Cannot find the instance %s", name)
            sys.exit(1)

        matches = find_all_by_name(instances, name)

        if len(matches) > 1:
            logger.warning(
                "Name '%s' matches %d instances (%s); using %s",
                name,
                len(matches),
                ", ".join(match.id for match in matches),
                target.id,
            )

        return target

    def ls(self) -> None:
        """Print a table of all instances in the configured region."""
        directory = self.directory_factory(self.config)
        instances = directory.list()
        render_table(instances, directory.region)

    def start(self, name: str) -> StateChange:
        """Start the instance named ``name`` and print its transition.

        Parameters
        ----------
        name : str
            Name tag of the instance to start

        Returns
        -------
        StateChange
            Transition acknowledged by the provider
        """
        target = self._find_instance(name)
        logger.debug("Requesting start of %s", target.id)

        state_change = self.control_factory(self.config).start(target)
        render_transition(state_change)
        return state_change

    def stop(self, name: str) -> StateChange:
        """Stop the instance named ``name`` and print its transition.

        Parameters
        ----------
        name : str
            Name tag of the instance to stop

        Returns
        -------
        StateChange
            Transition acknowledged by the provider
        """
        target = self._find_instance(name)
        logger.debug("Requesting stop of %s", target.id)

        state_change = self.control_factory(self.config).stop(target)
        render_transition(state_change)
        return state_change
