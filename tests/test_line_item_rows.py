from invoice_studio.ui.components.line_item_rows import LineItemRows


def test_removing_last_row_blanks_it():
    assert LineItemRows._resets_on_remove(1)
    assert LineItemRows._resets_on_remove(0)


def test_removing_one_of_several_rows_deletes_it():
    assert not LineItemRows._resets_on_remove(2)
    assert not LineItemRows._resets_on_remove(5)
