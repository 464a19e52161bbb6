#!/usr/bin/env python

'''
Cascades two layers of an external WMS as a single layer group, then swaps
one of them for another layer and finally removes the whole service.
'''

from geoserver_repository import GeoserverRepository

repo = GeoserverRepository({
    "geoserverConnection": {
        "host": "localhost",
        "port": 8080,
        "context": "geoserver",
        "user": "admin",
        "pass": "geoserver",
        "workspace": "geoportal",
        "datastore": "flat"
    },
    "database": {"flat": {}}
})

service = {
    "name": "ch",
    "label": "geo.admin.ch",
    "url": "https://wms.geo.admin.ch/?SERVICE=WMS&REQUEST=GetCapabilities"
}
products = {
    "name": "products",
    "label": "Agricultural products",
    "layerNames": "ch.blw.alpprodukte,ch.blw.bergprodukte",
    "externalWmsService": service
}

repo.create_wms_store(service)
repo.create_wms_layer(products)

updated = dict(products, layerNames="ch.blw.alpprodukte,ch.blw.ursprungsbezeichnungen-fleisch")
repo.update_wms_layer(updated, products)
print(repo.get_layer_group(updated))

repo.delete_wms_external_service(service, [updated])
