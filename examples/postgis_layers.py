#!/usr/bin/env python

'''
Publishes a few PostGIS tables through the default workspace and datastore,
recalculating their bounding boxes once published.

Connection settings come from the GS*/DB* environment variables.
'''

import sys

from geoserver_repository import GeoserverRepository, RepositoryConfig

repo = GeoserverRepository(RepositoryConfig.from_env())
repo.initialize_workspace()

for table in sys.argv[1:] or ["roads", "rivers"]:
    repo.create_feature_type({"name": table})
    repo.recalculate_feature_type_bbox({"name": table})
    print(table, repo.get_layer({"name": table}).get("defaultStyle"))
