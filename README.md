# ministructs

Small, readable data structures that hold strings. Each one has a `render()`
method that returns a plain-text listing for inspection.

| Module | Class | Main operations |
| --- | --- | --- |
| `ministructs.stack` | `Stack` | `push`, `pop` (top item), `render` |
| `ministructs.fifo` | `Queue` | `push`, `pop` (front item), `render` |
| `ministructs.dynarray` | `DynArray` | `append`, `insert`, `pop`, `get`, `[]` read and write, `render` |
| `ministructs.hashtable` | `HashTable` | `put`, `get`, `remove`, `bucket_of`, `in`, `render` |
| `ministructs.tree` | `Tree` | `insert`, `contains`, `is_full`, `render` |
| `ministructs.slist` | `SinglyLinkedList` | `push_back`, `push_front`, `pop_front`, `pop_back`, `remove`, `find`, `render` |
| `ministructs.dlist` | `DoublyLinkedList` | the same as `SinglyLinkedList`, plus `reversed()` |

Every class has `is_empty()`. All of them except `Tree` support `len()` and
iteration. `Stack` iterates from the top down; `HashTable` iterates over its
keys, bucket by bucket.

## Behaviour worth knowing

- `Stack.pop`, `Queue.pop` and the linked lists' `pop_front`/`pop_back` return
  the removed item and raise `IndexError` when the container is empty.
- `DynArray.get`, `insert`, `pop` and item assignment raise `IndexError` on an
  empty array or an index out of range. `pop` also accepts an index equal to
  the length and then removes the last item.
- `HashTable` has seven buckets; a key goes to the bucket given by the sum of
  its character codes modulo seven. `put` replaces an existing value in place.
  `get` and `remove` raise `KeyError` for a missing key.
- `Tree.insert` puts a new item into the first free child slot (left, then
  right) of the node it is visiting. Only when both are taken does it move on,
  to the right if the item is not less than the node's data, otherwise to the
  left. `contains` follows that same path. `is_full` is true when every node
  has no children or two, and false for an empty tree. `render` draws the tree
  sideways, with the right subtree above.
- The linked lists' `remove` deletes every occurrence of a value and raises
  `ValueError` when the list is empty or the value is not there. `find` returns
  the list of positions where the value occurs.

## Installation

```
pip install .
```

## Example

```python
from ministructs.hashtable import HashTable
from ministructs.slist import SinglyLinkedList

table = HashTable()
table.put("key1", "value1")
table.put("key1", "3")          # replaces the earlier value
print(table.get("key1"))        # 3

items = SinglyLinkedList()
items.push_back("B")
items.push_back("C")
items.push_front("A")
items.remove("B")
print(list(items))              # ['A', 'C']
print(items.find("C"))          # [1]
print(items.render())
```

## What it does not do

This is a library only: there is no command-line program. The structures live
in memory and are not saved anywhere. The hash table does not resize, and the
tree has no removal.

## Running the tests

```
pip install .[test]
pytest
```