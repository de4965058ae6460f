from .query import DEFAULT_PAGE_SIZE as DEFAULT_PAGE_SIZE
from .query import Page as Page
from .query import filter_records as filter_records
from .query import paginate as paginate
from .table_view import TableView as TableView
