# sellarity

A small sales management system that runs in the terminal. Admins maintain
a product catalog and look at sales figures; customers browse products, fill
a cart, pay at checkout, rate what they bought and get a receipt.

## Installing

```
pip install .
```

## Running

```
sellarity
```

The command takes no options besides `--help`. It exits with status 0 when
**Exit** is chosen and 1 when input ends or Ctrl-C is pressed.

The landing screen offers:

- **Log in as Admin**: add, rename, reprice and delete products, view the
  inventory table (and print it to `productInfoFile.txt` in the current
  directory), and view bar graphs of ratings or sales.
- **Log in as Customer**: move through the products with the arrow keys,
  press Enter to put the highlighted one in the cart, Space to check out and
  `e` to leave. At checkout, enter a payment and choose Submit; if the
  payment covers the total, the sale is recorded, you are asked to rate each
  distinct product bought (1 to 5), and a receipt is written to
  `receipt.txt` in the current directory.
- **Register**: create a customer account from a username, name, contact
  number and password.
- **Exit**.

Up and Down move between options (blank lines are skipped) and Enter chooses.

The program starts with a demonstration catalog of three products, an admin
account `admin` and a customer account `user1`, both with the password
`password`.

## Using it as a library

The catalog, accounts and report formatting work without the screens:

```python
from sellarity.catalog import Catalog
from sellarity.reports import receipt_text

catalog = Catalog()
catalog.add_product("tea", "12.50")
catalog.add_product("bread", "30")
orders = [0, 1, 0]
catalog.record_sales(orders)
print(receipt_text(orders, catalog, total_cost=55.0, change=45.0))
```

- `sellarity.catalog`: `Product` and `Catalog`, with `add_product`,
  `rename`, `reprice`, `remove`, `record_sales`, `rate` (running average of
  1 to 5 ratings), `total_sales` and `names`. Bad positions raise
  `IndexError`; bad prices and ratings raise `ValueError`.
- `sellarity.accounts`: `Account`, `CustomerInfo` and `AccountStore`, with
  `create_user` and `authenticate`.
- `sellarity.reports`: `table_header`, `product_row`, `graph_lines`,
  `receipt_text`, `write_receipt`, `product_info_text` and
  `write_product_info`.
- `sellarity.customer`: `order_counts`, `order_summary_lines`, `order_total`
  and the `CustomerScreens` used at checkout.
- `sellarity.terminal.Terminal` draws centred text and reads keys; it can be
  given its own input and output streams, a fixed width and a fixed sequence
  of `Key` values, which makes the screens scriptable.
- `sellarity.app.Application` ties the screens together; `run()` shows the
  main menu.

## What it does not do

- Nothing is saved between sessions: accounts, products, ratings and sales
  live in memory only.
- Registration keeps only the username and password; the name and contact
  number are asked for but not stored.
- Passwords are compared as plain text.

## Running the tests

```
pip install .[test]
pytest
```