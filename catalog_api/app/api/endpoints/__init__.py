"""Resource routers: persons, products, performance and greeting."""
