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

from functools import partial

from geoserver_repository.exceptions import UnknownResourceTypeError
from geoserver_repository.support import build_url

GET = "get"
CREATE = "create"
DELETE = "delete"
OPERATIONS = (GET, CREATE, DELETE)


class GeoserverTypes(object):
    """The resource vocabulary of the REST API."""

    WORKSPACE = "Workspace"
    DATASTORE = "Datastore"
    FEATURETYPE = "FeatureType"
    LAYER = "Layer"
    LAYERGROUP = "LayerGroup"
    COVERAGESTORE = "CoverageStore"
    COVERAGE = "Coverage"
    WMSSTORE = "WmsStore"
    WMSLAYER = "WmsLayer"
    WMTSSTORE = "WmtsStore"
    WMTSLAYER = "WmtsLayer"
    STYLE = "Style"
    WORKSPACESTYLE = "WorkspaceStyle"
    LAYERSTYLE = "LayerStyle"

    ALL = (
        WORKSPACE, DATASTORE, FEATURETYPE, LAYER, LAYERGROUP, COVERAGESTORE, COVERAGE,
        WMSSTORE, WMSLAYER, WMTSSTORE, WMTSLAYER, STYLE, WORKSPACESTYLE, LAYERSTYLE
    )


# service endpoints that are not bound to a resource type
REST_API = {
    "about": ("about", "version.json"),
    "reload": ("reload",),
    "reset": ("reset",),
    "fonts": ("fonts.json",),
}

# file based coverage store creation addresses the store itself
# (PUT .../coveragestores/<name>/external.<type>)
CREATE_ON_ITEM = (GeoserverTypes.COVERAGESTORE,)


class Resolver(object):
    """
    Maps (type, config, operation) onto the REST URL of a resource.

    Every type is described by its collection path and the segment naming a
    single item of that collection. `get` and `delete` address the item,
    `create` addresses the collection; a config without an identifying name
    (and no configured default) addresses the collection as well.
    """

    def __init__(self, rest_url, workspace=None, datastore=None):
        self.rest_url = rest_url
        self.workspace = workspace
        self.datastore = datastore
        self.paths = {
            GeoserverTypes.WORKSPACE: self._workspace_path,
            GeoserverTypes.DATASTORE: self._datastore_path,
            GeoserverTypes.FEATURETYPE: self._featuretype_path,
            GeoserverTypes.LAYER: self._layer_path,
            GeoserverTypes.LAYERGROUP: self._layergroup_path,
            GeoserverTypes.COVERAGESTORE: self._coveragestore_path,
            GeoserverTypes.COVERAGE: self._coverage_path,
            GeoserverTypes.WMSSTORE: partial(self._external_store_path, "wms"),
            GeoserverTypes.WMSLAYER: partial(self._external_layer_path, "wms"),
            GeoserverTypes.WMTSSTORE: partial(self._external_store_path, "wmts"),
            GeoserverTypes.WMTSLAYER: partial(self._external_layer_path, "wmts"),
            GeoserverTypes.STYLE: self._style_path,
            GeoserverTypes.WORKSPACESTYLE: self._workspace_style_path,
            GeoserverTypes.LAYERSTYLE: self._layer_style_path,
        }

    def resolve_workspace_name(self, config):
        return config and config.get("workspace") or self.workspace

    def _workspace_path(self, config):
        return ["workspaces"], config.get("name") or self.workspace

    def _datastore_path(self, config):
        ws = self.resolve_workspace_name(config)
        return ["workspaces", ws, "datastores"], config.get("name") or self.datastore

    def _featuretype_path(self, config):
        ws = self.resolve_workspace_name(config)
        ds = config.get("datastore") or self.datastore
        return ["workspaces", ws, "datastores", ds, "featuretypes"], config.get("name")

    def _layer_path(self, config):
        name = config.get("name")
        item = f"{self.resolve_workspace_name(config)}:{name}" if name else None
        return ["layers"], item

    def _layergroup_path(self, config):
        return ["layergroups"], config.get("name")

    def _coveragestore_path(self, config):
        ws = self.resolve_workspace_name(config)
        return ["workspaces", ws, "coveragestores"], config.get("name")

    def _coverage_path(self, config):
        ws = self.resolve_workspace_name(config)
        store = config.get("store") or config.get("name")
        return ["workspaces", ws, "coveragestores", store, "coverages"], config.get("name")

    def _external_store_path(self, kind, config):
        ws = self.resolve_workspace_name(config)
        return ["workspaces", ws, f"{kind}stores"], config.get("name")

    def _external_layer_path(self, kind, config):
        ws = self.resolve_workspace_name(config)
        service = config.get(f"external{kind.capitalize()}Service") or {}
        store = service.get("name") or config.get("store")
        layer = config.get("layerName") or config.get("name")
        return ["workspaces", ws, f"{kind}stores", store, f"{kind}layers"], layer

    def _style_path(self, config):
        return ["styles"], config.get("name")

    def _workspace_style_path(self, config):
        ws = self.resolve_workspace_name(config)
        return ["workspaces", ws, "styles"], config.get("name")

    def _layer_style_path(self, config):
        # alternate styles of a layer are only exposed as a collection
        layer = f"{self.resolve_workspace_name(config)}:{config.get('name')}"
        return ["layers", layer, "styles"], None

    def _path(self, type_name, config):
        try:
            path = self.paths[type_name]
        except KeyError:
            raise UnknownResourceTypeError(f"Unknown Geoserver type: {type_name}")
        return path(config or {})

    def item(self, type_name, config=None):
        """The segment naming a single resource, None when the config names none."""
        return self._path(type_name, config)[1]

    def resolve(self, type_name, config=None, operation=GET, query=None):
        if operation not in OPERATIONS:
            raise ValueError(f"operation must be one of: {', '.join(OPERATIONS)}")

        collection, item = self._path(type_name, config)
        segments = list(collection)
        if item and (operation != CREATE or type_name in CREATE_ON_ITEM):
            segments.append(item)
        return build_url(self.rest_url, segments, query)

    def get(self, type_name, config=None, query=None):
        return self.resolve(type_name, config, GET, query)

    def create(self, type_name, config=None, query=None):
        return self.resolve(type_name, config, CREATE, query)

    def delete(self, type_name, config=None, query=None):
        return self.resolve(type_name, config, DELETE, query)

    def service_url(self, endpoint):
        return build_url(self.rest_url, REST_API[endpoint])
