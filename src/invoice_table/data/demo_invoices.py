"""Demo invoices shown when no export is configured."""

from invoice_table.models.invoice import Invoice

_RECORDS = [
    ("INV-1001", "Acme Logistics", "2024-01-04", "2024-02-03", "$1,250.00 XLM", "Paid"),
    ("INV-1002", "Beta Foods", "2024-01-09", "2024-02-08", "$480.50 XLM", "Pending"),
    ("INV-1003", "Cobalt Studio", "2024-01-15", "2024-01-30", "$99.99 XLM", "Overdue"),
    ("INV-1004", "Delta Freight", "2024-01-22", "2024-02-21", "$3,400.00 XLM", "Paid"),
    ("INV-1005", "Evergreen Farms", "2024-02-01", "2024-03-02", "$725.00 XLM", "Pending"),
    ("INV-1006", "Fable Books", "2024-02-06", "2024-02-20", "$62.40 XLM", "Overdue"),
    ("INV-1007", "Granite Works", "2024-02-12", "2024-03-13", "$1,980.75 XLM", "Paid"),
    ("INV-1008", "Harbor Marine", "2024-02-19", "2024-03-20", "$5,100.00 XLM", "Pending"),
    ("INV-1009", "Ionic Labs", "2024-02-27", "2024-03-12", "$310.00 XLM", "Overdue"),
    ("INV-1010", "Juniper Health", "2024-03-04", "2024-04-03", "$860.20 XLM", "Paid"),
    ("INV-1011", "Kestrel Air", "2024-03-11", "2024-04-10", "$2,275.00 XLM", "Pending"),
    ("INV-1012", "Lumen Energy", "2024-03-18", "2024-04-01", "$145.00 XLM", "Overdue"),
    ("INV-1013", "Acme Logistics", "2024-03-25", "2024-04-24", "$640.00 XLM", "Paid"),
    ("INV-1014", "Maple & Co", "2024-04-02", "2024-05-02", "$1,020.00 XLM", "Pending"),
    ("INV-1015", "Nimbus Cloud", "2024-04-09", "2024-05-09", "$4,450.00 XLM", "Paid"),
    ("INV-1016", "Beta Foods", "2024-04-16", "2024-04-30", "$275.30 XLM", "Overdue"),
]

DEMO_INVOICES: list[Invoice] = [
    Invoice(
        id=invoice_id,
        client=client,
        issue_date=issue_date,
        due_date=due_date,
        amount=amount,
        status=status,
    )
    for invoice_id, client, issue_date, due_date, amount, status in _RECORDS
]
