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

from geoserver_repository.catalog import ResourceManager
from geoserver_repository.resolver import GeoserverTypes


class LayerManager(ResourceManager):
    resource_type = GeoserverTypes.LAYER

    def layer_exists(self, config):
        return self.exists(config)

    def get_layer(self, config):
        return self.fetch(config, "layer")

    def create_layer(self, config):
        name = self.require(config, "name", "layer name required")
        return self.create_unless_exists(config, {"layer": config.get("layer") or {"name": name}})

    def update_layer(self, config):
        self.require(config, "name", "layer name required")
        payload = {"layer": self.require(config, "layer", "layer parameter required")}
        return self.update(config, payload)

    def delete_layer(self, config):
        self.require(config, "name", "layer name required")
        return self.delete_if_exists(config, recurse=True)
