"""Frozen YACS configuration for tagmap, loaded from YAML files and command-line overrides.

TagmapCfgNode holds the merged parameters; after every merge the node is frozen again, so code that receives it
can only read it. TagmapArgsCfgNode adds the `--config-file` and `--config-param` options to an argparse parser
and applies them to a TagmapCfgNode, files first and explicit parameters last.
"""
import argparse
from typing import List, Optional

from yacs.config import CfgNode


class TagmapCfgNode:
    """Class that reads YAML and freezes parameters (no argparse interface)."""

    def __init__(self, cfg_init: CfgNode) -> None:
        """Initialize the configuration node

        Args:
            cfg_init: default config
        """
        self.param = cfg_init
        self.param.set_new_allowed(False)
        self.param.freeze()

    def load_file(self, file_name: str) -> None:
        """Load config from .yaml file.

        Args:
            file_name: path to yaml file
        """
        self.param.defrost()
        self.param.merge_from_file(file_name)
        self.param.freeze()

    def load_list(self, list_param: List[str]) -> None:
        """
        Load from argparser. YACS will infer the appropriate types to convert strings

        Args:
            list_param: a parameter list loaded from argparser with format
                [ module.hyperparameter1 value
                  module.hyperparameter2 value
                  ...
                ]
        """
        self.param.defrost()
        self.param.merge_from_list(list_param)
        self.param.freeze()


class TagmapArgsCfgNode:
    """Class that merges command-line input parameters with pre-defined parameters
    from a YAML file.

    1. add arguments to parser for the load of config file and parameter list
    2. load arguments into CfgNode for easier initialization
    """

    def __init__(self, description: str) -> None:
        """Initialization of argparser and arguments to initialize CfgNode

        Args:
            description: a string that provides a helpful description of parser
        """
        self.parser = argparse.ArgumentParser(description=description)
        self.parser.add_argument(
            "-cf",
            "--config-file",
            nargs="+",
            type=str,
            help="Path to config files",
        )
        self.parser.add_argument(
            "-cp",
            "--config-param",
            nargs="+",
            type=str,
            help="Config parameter(s): Module1.Param1 Value1 Module2.Param2 Value2 ... ",
        )

    def init_config(
        self,
        config: TagmapCfgNode,
        args: Optional[List[str]] = None,
    ) -> TagmapCfgNode:
        """Initialize a CfgNode using command-line arguments

        Args:
            config: config without initialization
            args: command-line arguments, defaults to sys.argv

        Returns:
            config: config after initialization
        """
        parsed_args, _ = self.parser.parse_known_args(args)

        # YAML files are merged first so that explicit parameters override them
        if parsed_args.config_file:
            for fpath in parsed_args.config_file:
                config.load_file(fpath)

        if parsed_args.config_param:
            config.load_list(parsed_args.config_param)
        return config
