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


class DatastoreManager(ResourceManager):
    """PostGIS datastores, connected with the repository's database parameters by default."""

    resource_type = GeoserverTypes.DATASTORE

    def resolve_datastore_config(self, config):
        return {
            "name": config and config.get("name") or self.catalog.datastore,
            "workspace": self.resolve_workspace_name(config)
        }

    def datastore_request_object(self, config):
        ds = self.resolve_datastore_config(config)
        connection_parameters = config and config.get("connectionParameters") or self.catalog.config.database
        return {
            "dataStore": {
                "name": ds["name"],
                "enabled": True,
                "workspace": {"name": ds["workspace"]},
                "connectionParameters": connection_parameters
            }
        }

    def datastore_exists(self, config=None):
        return self.exists(self.resolve_datastore_config(config))

    def get_datastore(self, config=None):
        return self.fetch(self.resolve_datastore_config(config), "dataStore")

    def create_datastore(self, config=None):
        return self.create_unless_exists(
            self.resolve_datastore_config(config),
            self.datastore_request_object(config)
        )

    def update_datastore(self, config):
        payload = {"dataStore": self.require(config, "dataStore", "dataStore parameter required")}
        return self.update(self.resolve_datastore_config(config), payload)

    def delete_datastore(self, config=None):
        ds = self.resolve_datastore_config(config)
        if not self.exists(ds):
            return config
        return self.catalog.delete_geoserver_object(self.resource_type, ds, recurse=True)
