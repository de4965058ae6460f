from .customer_factory import CustomerDetails as CustomerDetails
from .customer_factory import CustomerFactory as CustomerFactory
