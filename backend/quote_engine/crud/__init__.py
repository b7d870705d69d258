from . import crud_quote
