# Service classes that sit between routers and the storage gateway.
