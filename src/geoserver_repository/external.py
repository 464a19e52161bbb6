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
from geoserver_repository.exceptions import ConflictingDataError, FailedRequestError, InvalidConfigurationError
from geoserver_repository.layergroup import DEFAULT_SRS, PROJECTION_POLICY
from geoserver_repository.resolver import GeoserverTypes
from geoserver_repository.support import sanitize_layer_name, split_names

logger = logging.getLogger("gsrepository.external")


class ExternalServiceKind(object):
    """
    A kind of cascaded service. Stores and layers of every kind share the
    same REST shape, only the keys differ (`wmsStore`/`wmtsStore`, ...).
    """

    def __init__(self, name, store_type, layer_type):
        self.name = name
        self.label = name.upper()
        self.store_type = store_type
        self.layer_type = layer_type

    @property
    def store_key(self):
        return f"{self.name}Store"

    @property
    def layer_key(self):
        return f"{self.name}Layer"

    @property
    def service_key(self):
        return f"external{self.name.capitalize()}Service"

    def __repr__(self):
        return f"ExternalServiceKind[{self.label}]"


WMS = ExternalServiceKind("wms", GeoserverTypes.WMSSTORE, GeoserverTypes.WMSLAYER)
WMTS = ExternalServiceKind("wmts", GeoserverTypes.WMTSSTORE, GeoserverTypes.WMTSLAYER)


class ExternalStoreManager(ResourceManager):
    """The store pointing GeoServer at a remote capabilities document."""

    def __init__(self, catalog, kind):
        super(ExternalStoreManager, self).__init__(catalog)
        self.kind = kind
        self.resource_type = kind.store_type

    def resolve_store_config(self, config):
        return {
            "name": config and config.get("name"),
            "workspace": self.resolve_workspace_name(config)
        }

    def store_request_object(self, config):
        return {
            self.kind.store_key: {
                "name": config.get("name"),
                "description": config.get("label"),
                "type": self.kind.label,
                "enabled": True,
                "workspace": {"name": self.resolve_workspace_name(config)},
                "capabilitiesURL": config.get("url"),
                "user": config.get("username"),
                "password": config.get("password"),
                "metadata": {},
                "maxConnections": 6,
                "readTimeout": 60,
                "connectTimeout": 30
            }
        }

    def store_exists(self, config):
        return self.exists(self.resolve_store_config(config))

    def get_store(self, config):
        return self.fetch(self.resolve_store_config(config), self.kind.store_key)

    def create_store(self, config):
        store = self.resolve_store_config(config)
        if self.exists(store):
            raise ConflictingDataError(f"{self.kind.label} Store {store['name']} already exists")
        return self.catalog.create_geoserver_object(self.resource_type, store, self.store_request_object(config))

    def update_store(self, config):
        return self.update(self.resolve_store_config(config), self.store_request_object(config))

    def delete_store(self, config):
        store = self.resolve_store_config(config)
        if not self.exists(store):
            return config
        return self.catalog.delete_geoserver_object(self.resource_type, store, recurse=True)


class ExternalLayerManager(ResourceManager):
    """
    Composite layers re-publishing a remote service.

    An external layer config names the service (`external<Kind>Service`) and
    a comma separated list of native layer names (`layerNames`). Every native
    layer becomes one <kind> layer in the store plus its published layer,
    named `<service>_<native>`; a layer group named after the config bundles
    them. Children are created before the group and the group is deleted
    before its children, GeoServer refusing dangling group members.
    """

    def __init__(self, catalog, kind, stores, layer_groups):
        super(ExternalLayerManager, self).__init__(catalog)
        self.kind = kind
        self.resource_type = kind.layer_type
        self.stores = stores
        self.layer_groups = layer_groups

    def service_name(self, external_layer):
        service = external_layer.get(self.kind.service_key) or {}
        if not service.get("name"):
            raise InvalidConfigurationError(f"{self.kind.service_key} name required")
        return service["name"]

    def layer_request_parameters(self, external_layer, native_names=None):
        """
        (layer, <kind> layer) config pairs of the given native names, all of
        the layer's `layerNames` by default.
        """
        if native_names is None:
            native_names = split_names(external_layer.get("layerNames"))
        service_name = self.service_name(external_layer)
        workspace = self.resolve_workspace_name(external_layer)

        parameters = []
        for native_name in native_names:
            layer_name = sanitize_layer_name(service_name, native_name)
            kind_layer = dict(external_layer, layerName=layer_name, nativeName=native_name)
            parameters.append(({"name": layer_name, "workspace": workspace}, kind_layer))
        return parameters

    def layer_request_object(self, config):
        return {
            self.kind.layer_key: {
                "name": config.get("layerName"),
                "nativeName": config.get("nativeName"),
                "namespace": config.get("nameSpace") or self.catalog.workspace,
                "srs": config.get("srs") or DEFAULT_SRS,
                self.kind.store_key: {"name": self.service_name(config)},
                "projectionPolicy": PROJECTION_POLICY
            }
        }

    def layer_exists(self, layer_params, kind_layer_params):
        return (self.catalog.geoserver_object_exists(GeoserverTypes.LAYER, layer_params) and
                self.exists(kind_layer_params))

    def get_layer(self, config):
        return self.fetch(config, self.kind.layer_key)

    def make_sure_layer_exists(self, layer_params, kind_layer_params):
        if not self.layer_exists(layer_params, kind_layer_params):
            self.catalog.create_geoserver_object(
                self.resource_type, kind_layer_params, self.layer_request_object(kind_layer_params))
        return kind_layer_params["layerName"]

    def create_missing_layers(self, external_layer):
        return self.catalog.map_throttled(
            lambda pair: self.make_sure_layer_exists(*pair),
            self.layer_request_parameters(external_layer))

    def create_layer(self, external_layer):
        layer_names = self.create_missing_layers(external_layer)
        return self.layer_groups.create_layer_group(external_layer, layer_names)

    def update_layer(self, external_layer, previous_layer):
        if not self.layer_groups.layer_group_exists(external_layer):
            raise FailedRequestError(f"{self.kind.label} layer {external_layer.get('name')} doesn't exist")

        native_names = split_names(external_layer.get("layerNames"))
        obsolete = [n for n in split_names(previous_layer.get("layerNames")) if n not in native_names]

        layer_names = self.create_missing_layers(external_layer)
        self.layer_groups.update_layer_group(external_layer, layer_names)
        # obsolete pairs live where the previous config published them
        previous_layer = self._bound_to(external_layer.get(self.kind.service_key), previous_layer)
        self.delete_unused_layers(previous_layer, obsolete)
        return True

    def delete_layer_everywhere(self, layer_params, kind_layer_params):
        """Best effort: a failure is logged and reported as False."""
        try:
            if not self.layer_exists(layer_params, kind_layer_params):
                return False
            self.catalog.delete_geoserver_object(GeoserverTypes.LAYER, layer_params, recurse=True)
            self.catalog.delete_geoserver_object(self.resource_type, kind_layer_params, recurse=True)
            return True
        except FailedRequestError as e:
            logger.error(f"Could not delete {self.kind.label} layer {layer_params['name']}: {e}")
            return False

    def delete_pairs(self, pairs):
        return self.catalog.map_throttled(lambda pair: self.delete_layer_everywhere(*pair), pairs)

    def delete_unused_layers(self, external_layer, native_names):
        if not native_names:
            return []
        return self.delete_pairs(self.layer_request_parameters(external_layer, native_names))

    def delete_layer(self, external_layer):
        self.layer_groups.delete_layer_group(external_layer)
        return self.delete_pairs(self.layer_request_parameters(external_layer))

    def delete_external_service(self, service, external_layers):
        """
        Removes a service with everything published out of it: the layer
        groups, then their child layers, then the store.
        """
        external_layers = [self._bound_to(service, layer) for layer in external_layers or []]
        for external_layer in external_layers:
            self.layer_groups.delete_layer_group(external_layer)

        pairs = dict()
        for external_layer in external_layers:
            for layer_params, kind_layer_params in self.layer_request_parameters(external_layer):
                pairs.setdefault(layer_params["name"], (layer_params, kind_layer_params))
        self.delete_pairs(list(pairs.values()))

        return self.stores.delete_store(service)

    def _bound_to(self, service, external_layer):
        if external_layer.get(self.kind.service_key):
            return external_layer
        return dict(external_layer, **{self.kind.service_key: service})
