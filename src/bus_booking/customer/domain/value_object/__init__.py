from .customer_id import CustomerId as CustomerId
