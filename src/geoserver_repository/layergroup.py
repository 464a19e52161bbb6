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
from geoserver_repository.exceptions import ConflictingDataError
from geoserver_repository.resolver import GeoserverTypes

DEFAULT_SRS = "EPSG:2056"
PROJECTION_POLICY = "REPROJECT_TO_DECLARED"


def layer_group_request_object(config, layer_names):
    '''
    Group body as GeoServer expects it: every member layer enabled and drawn
    with its default style (one empty style entry per layer).
    '''
    layer_names = list(layer_names)
    return {
        "layerGroup": {
            "name": config.get("name"),
            "title": config.get("label"),
            "layers": {
                "layer": [{"enabled": True, "name": name} for name in layer_names]
            },
            "styles": {
                "style": [""] * len(layer_names)
            }
        },
        "srs": config.get("srs") or DEFAULT_SRS,
        "projectionPolicy": PROJECTION_POLICY
    }


class LayerGroupManager(ResourceManager):
    resource_type = GeoserverTypes.LAYERGROUP

    def layer_group_request_object(self, config, layer_names):
        return layer_group_request_object(config, layer_names)

    def layer_group_exists(self, config):
        return self.exists(config)

    def get_layer_group(self, config):
        return self.fetch(config, "layerGroup")

    def create_layer_group(self, config, layer_names):
        if self.exists(config):
            raise ConflictingDataError(f"Layer group {config.get('name')} already exists")
        return self.catalog.create_geoserver_object(
            self.resource_type, config, layer_group_request_object(config, layer_names))

    def update_layer_group(self, config, layer_names):
        return self.update(config, layer_group_request_object(config, layer_names))

    def delete_layer_group(self, config):
        return self.delete_if_exists(config)
