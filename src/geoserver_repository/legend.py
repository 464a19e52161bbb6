# -*- coding: utf-8 -*-
#########################################################################
#
# Copyright 2019, GeoSolutions Sas.
# All rights reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE.txt file in the root directory of this source tree.
#
#########################################################################

from geoserver_repository.exceptions import InvalidConfigurationError

DEFAULT_WIDTH = 200
DEFAULT_HEIGHT = 100
DEFAULT_FORMAT = "image/png"


class Legend(object):
    """GetLegendGraphic URLs for a single rule of a style."""

    def __init__(self, config):
        self.base_url = config.base_url
        self.workspace = config.workspace

    def get_base_url(self, config):
        workspace = config and config.get("workspace") or self.workspace
        return f"{self.base_url}{workspace}/wms?"

    def format_parameters(self, config):
        parameters = [
            ("REQUEST", "GetLegendGraphic"),
            ("VERSION", "1.0.0"),
            ("FORMAT", config.get("format") or DEFAULT_FORMAT),
            ("WIDTH", config.get("width") or DEFAULT_WIDTH),
            ("HEIGHT", config.get("height") or DEFAULT_HEIGHT),
            ("LAYER", config["layer"]),
            ("TRANSPARENT", "true"),
            ("RULE", config["name"]),
            ("STYLE", config["style"]),
        ]
        return [f"{k}={v}" for k, v in parameters]

    def get_rule_url(self, config):
        if not (config and config.get("name") and config.get("style") and config.get("layer")):
            raise InvalidConfigurationError("rule, style and layer name required")
        return self.get_base_url(config) + "&".join(self.format_parameters(config))
