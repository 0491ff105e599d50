"""Fixed names and limits for GeoJSON input and OSM XML output."""

# Producer identifier written to the root element
GENERATOR = 'geojson2osm'

# Longest way accepted by the OSM API
MAX_WAY_NODES = 2000

# OSM XML
OSM_VERSION = '0.6'
OSM_ELEMENT = 'osm'
NODE_ELEMENT = 'node'
WAY_ELEMENT = 'way'
TAG_ELEMENT = 'tag'
ND_ELEMENT = 'nd'
UPLOAD_NEVER = 'never'
UPLOAD_TRUE = 'true'

# GeoJSON
FEATURE_COLLECTION = 'FeatureCollection'
FEATURE = 'Feature'
# Only these geometry types are converted; all others are skipped
POINT = 'Point'
LINESTRING = 'LineString'
