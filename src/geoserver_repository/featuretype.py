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

import logging

from geoserver_repository.catalog import ResourceManager
from geoserver_repository.exceptions import InvalidConfigurationError
from geoserver_repository.resolver import GeoserverTypes

logger = logging.getLogger("gsrepository.featuretype")

RECALCULATE_BBOX = "nativebbox,latlonbbox"


class FeatureTypeManager(ResourceManager):
    """
    Feature types published out of a datastore. Unless the config names
    them, the configured default workspace and datastore are used.
    """

    resource_type = GeoserverTypes.FEATURETYPE

    def resolve_feature_type_config(self, config):
        return {
            "name": config and config.get("name"),
            "datastore": config and config.get("datastore") or self.catalog.datastore,
            "workspace": self.resolve_workspace_name(config)
        }

    def feature_type_exists(self, config):
        return self.exists(self.resolve_feature_type_config(config))

    def get_feature_type(self, config):
        return self.fetch(self.resolve_feature_type_config(config), "featureType")

    def create_feature_type(self, config):
        name = self.require(config, "name", "featureType name required")
        feature_type = config.get("featureType") or {"name": name}
        return self.create_unless_exists(self.resolve_feature_type_config(config), {"featureType": feature_type})

    def update_feature_type(self, config):
        self.require(config, "name", "featureType name required")
        payload = {"featureType": self.require(config, "featureType", "featureType parameter required")}
        return self.update(self.resolve_feature_type_config(config), payload)

    def delete_feature_type(self, config):
        self.require(config, "name", "featureType name required")
        ft = self.resolve_feature_type_config(config)
        if not self.exists(ft):
            return config
        return self.catalog.delete_geoserver_object(self.resource_type, ft, recurse=True)

    def rename_feature_type(self, config, new_name):
        if not new_name:
            raise InvalidConfigurationError("featureType name required")
        self.require(config, "name", "featureType name required")

        feature_type = dict(self.get_feature_type(config))
        feature_type["name"] = new_name
        feature_type["nativeName"] = new_name
        logger.debug(f"Renaming featureType {config['name']} to {new_name}")
        return self.update(self.resolve_feature_type_config(config), {"featureType": feature_type})

    def recalculate_feature_type_bbox(self, config):
        ft = self.resolve_feature_type_config(config)
        payload = {"featureType": {"name": ft["name"], "enabled": True}}
        return self.update(ft, payload, query={"recalculate": RECALCULATE_BBOX})

