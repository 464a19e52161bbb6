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


def workspace_request_object(name):
    return {"workspace": {"name": name}}


class WorkspaceManager(ResourceManager):
    resource_type = GeoserverTypes.WORKSPACE

    def workspace_name(self, config):
        return config and config.get("name") or self.catalog.workspace

    def workspace_exists(self, config=None):
        return self.exists(self._named(config))

    def get_workspace(self, config=None):
        return self.fetch(self._named(config), "workspace")

    def create_workspace(self, config=None):
        config = self._named(config)
        return self.create_unless_exists(config, workspace_request_object(config["name"]))

    def delete_workspace(self, config=None):
        named = self._named(config)
        if not self.exists(named):
            return config
        return self.catalog.delete_geoserver_object(self.resource_type, named, recurse=True)

    def _named(self, config):
        named = dict(config or {})
        named["name"] = self.workspace_name(config)
        return named
