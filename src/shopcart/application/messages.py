"""User-facing notification texts.

These strings are shown verbatim to shoppers, so changing them is a
visible change of behaviour.
"""

OUT_OF_STOCK = "Quantidade solicitada fora de estoque"
ADD_FAILED = "Erro na adição do produto"
REMOVE_FAILED = "Erro na remoção do produto"
UPDATE_FAILED = "Erro na alteração de quantidade do produto"
