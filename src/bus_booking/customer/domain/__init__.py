from .entity import Customer as Customer
from .factory import CustomerDetails as CustomerDetails
from .factory import CustomerFactory as CustomerFactory
from .repository import CustomerRepository as CustomerRepository
from .value_object import CustomerId as CustomerId
