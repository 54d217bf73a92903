# This code is a Qiskit project.
#
# (C) Copyright IBM 2026.
#
# This code is licensed under the Apache License, Version 2.0. You may
# obtain a copy of this license in the LICENSE.txt file in the root directory
# of this source tree or at http://www.apache.org/licenses/LICENSE-2.0.
#
# Any modifications or derivative works of this code must retain this
# copyright notice, and modified files need to carry a notice indicating
# that they have been altered from the originals.

"""Utils for reading a user preference config file."""

import configparser
import os

from graphlc import exceptions

DEFAULT_FILENAME = os.path.join(os.path.expanduser("~"), ".graphlc", "settings.conf")

VALID_SOLVERS = ("z3", "gurobi")


class UserConfig:
    """Class representing a user config file

    The config file format should look like:

    [default]
    solver = z3
    solver_verbose = False
    solver_time_limit = 60
    solver_log_file = ~/.graphlc/solver.log

    """

    def __init__(self, filename=None):
        """Create a UserConfig

        Args:
            filename (str): The path to the user config file. If one isn't
                specified, ~/.graphlc/settings.conf is used.
        """
        if filename is None:
            self.filename = DEFAULT_FILENAME
        else:
            self.filename = filename
        self.settings = {}
        self.config_parser = configparser.ConfigParser()

    def read_config_file(self):
        """Read config file and parse the contents into the settings attr."""
        if not os.path.isfile(self.filename):
            return
        self.config_parser.read(self.filename)
        if "default" not in self.config_parser.sections():
            return

        # Parse solver
        solver = self.config_parser.get("default", "solver", fallback=None)
        if solver:
            if solver not in VALID_SOLVERS:
                valid_choices_string = "', '".join(VALID_SOLVERS)
                raise exceptions.GraphLCUserConfigError(
                    f"'{solver}' is not a valid solver. Choose from: '{valid_choices_string}'"
                )
            self.settings["solver"] = solver

        # Parse solver_verbose
        try:
            solver_verbose = self.config_parser.getboolean(
                "default", "solver_verbose", fallback=None
            )
        except ValueError as err:
            raise exceptions.GraphLCUserConfigError(
                f"Value assigned to solver_verbose is not valid. {str(err)}"
            ) from err
        if solver_verbose is not None:
            self.settings["solver_verbose"] = solver_verbose

        # Parse solver_time_limit
        try:
            time_limit = self.config_parser.getfloat("default", "solver_time_limit", fallback=None)
        except ValueError as err:
            raise exceptions.GraphLCUserConfigError(
                f"Value assigned to solver_time_limit is not valid. {str(err)}"
            ) from err
        if time_limit is not None:
            if time_limit <= 0:
                raise exceptions.GraphLCUserConfigError(
                    f"{time_limit} is not a valid solver time limit. Must be greater than 0"
                )
            self.settings["solver_time_limit"] = time_limit

        # Parse solver_log_file
        log_file = self.config_parser.get("default", "solver_log_file", fallback=None)
        if log_file:
            self.settings["solver_log_file"] = os.path.expanduser(log_file)


def set_config(key, value, section=None, file_path=None):
    """Adds or modifies a user configuration

    Only valid user config can be set in 'default' section. Custom
    user config can be added in any other sections.

    Args:
        key (str): name of the config
        value (obj): value of the config
        section (str, optional): if not specified, adds it to the
            `default` section of the config file.
        file_path (str, optional): the file to which config is added.
            If not specified, adds it to the default config file or
            if set, the value of `GRAPHLC_SETTINGS` env variable.

    Raises:
        GraphLCUserConfigError: if the config is invalid
    """
    filename = file_path or os.getenv("GRAPHLC_SETTINGS", DEFAULT_FILENAME)
    section = "default" if section is None else section

    if not isinstance(key, str):
        raise exceptions.GraphLCUserConfigError("Key must be string type")

    valid_config = {"solver", "solver_verbose", "solver_time_limit", "solver_log_file"}

    if section == "default" and key not in valid_config:
        raise exceptions.GraphLCUserConfigError(f"{key} is not a valid user config.")

    config = configparser.ConfigParser()
    config.read(filename)

    if section not in config.sections():
        config.add_section(section)

    config.set(section, key, str(value))

    try:
        directory = os.path.dirname(filename)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(filename, "w") as cfgfile:
            config.write(cfgfile)
    except OSError as ex:
        raise exceptions.GraphLCUserConfigError(
            f"Unable to load the config file {filename}. Error: '{str(ex)}'"
        ) from ex

    # validates config
    user_config = UserConfig(filename)
    user_config.read_config_file()


def get_config():
    """Read the config file from the default location or env var

    It will read a config file at either the default location
    ~/.graphlc/settings.conf or if set the value of the GRAPHLC_SETTINGS env var.

    Returns:
        dict: The settings dict from the parsed config file.
    """
    filename = os.getenv("GRAPHLC_SETTINGS", DEFAULT_FILENAME)
    if not os.path.isfile(filename):
        return {}
    user_config = UserConfig(filename)
    user_config.read_config_file()
    return user_config.settings
