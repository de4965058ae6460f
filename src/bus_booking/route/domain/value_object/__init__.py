from .route_id import RouteId as RouteId
