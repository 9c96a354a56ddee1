# HTTP API package: app factory, configuration, storage access, routers and services.
