# strutturedati

Stacks, queues and directed graphs written in plain Python, together with
the small algorithms and exam-style exercises usually built on top of them.
No third-party libraries are needed.

## What is inside

| Module | Contents |
| --- | --- |
| `strutturedati.stacks` | `ArrayStack` (bounded, default capacity 100), `LinkedStack` (unbounded), `StackEmptyError`, `StackFullError` |
| `strutturedati.stack_exercises` | `reversed_stack`, `remove_greater`, `remove_all`, `count`, `reverse_stack` |
| `strutturedati.queues` | `LinkedQueue` (unbounded), `CircularQueue` (fixed capacity), `QueueEmptyError` |
| `strutturedati.bins` | `Bins`: three queues holding 1–3, 4–6 and every other integer |
| `strutturedati.expressions` | `evaluate_postfix`, `evaluate_polish`, `infix_to_postfix` |
| `strutturedati.hanoi` | `Peg`, `moves_recursive`, `moves_iterative`, `describe_move` |
| `strutturedati.graph` | `Graph` (abstract), `MatrixGraph`, `Edge` |
| `strutturedati.graph_lab` | `out_degree`, `find_path` |
| `strutturedati.graph_exercises` | `relevant_adjacent`, `update_adjacent`, `reachable`, `same_color_path`, `uniform_color_path`, `mean_n2`, `count_same`, `count_unit_paths`, `sum_path` |
| `strutturedati.receipt` | `Receipt` and `Product`, a shopping receipt |

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## A quick tour

### Stacks and queues

```python
from strutturedati.stacks import ArrayStack, StackEmptyError

stack = ArrayStack(3)
stack.push(3)
stack.push(5)
stack.top()      # 5
stack.pop()      # 5
len(stack)       # 1
```

`top` and `pop` on an empty stack raise `StackEmptyError`; `push` onto a full
`ArrayStack` raises `StackFullError`.

```python
from strutturedati.queues import CircularQueue

queue = CircularQueue(3)
for value in (1, 2, 3, 4):
    queue.enqueue(value)   # the fourth call returns False: the queue is full
queue.front()              # 1
queue.dequeue()            # 1
list(queue)                # [2, 3]
```

`front` on an empty queue raises `QueueEmptyError`; `dequeue` on an empty
queue leaves it as it is and returns `None`.

```python
from strutturedati.bins import Bins

bins = Bins()
for value in (2, 3, 1, 4, 5, 9):
    bins.insert(value)
bins.freq(0)     # 3
bins.mean(1)     # 4.5
```

### Expressions

```python
from strutturedati.expressions import evaluate_postfix, evaluate_polish, infix_to_postfix

evaluate_postfix("2 3 + 4 *")                   # 20
evaluate_polish("12 3 -")                       # 9
infix_to_postfix("(5*((9*8)+(7*(4+6))))")       # "5 9 8 * 7 4 6 + * + *"
```

`evaluate_postfix` knows `+` and `*`; `evaluate_polish` also knows `-` and
`/`, expects every number to be followed by a space and truncates each
result toward zero.

### Towers of Hanoi

```python
from strutturedati.hanoi import Peg, describe_move, moves_recursive, moves_iterative

moves_recursive(2)
# [(Peg.ORIGIN, Peg.MIDDLE), (Peg.ORIGIN, Peg.DESTINATION), (Peg.MIDDLE, Peg.DESTINATION)]
moves_iterative(2) == moves_recursive(2)        # True
describe_move(Peg.ORIGIN, Peg.DESTINATION)      # "muovi un disco da origine a destinazione"
```

### Graphs

```python
from strutturedati.graph import MatrixGraph
from strutturedati.graph_lab import out_degree, find_path

graph = MatrixGraph(10)
for node in range(4):
    graph.add_node(node)
    graph.set_label(node, node + 1)
graph.add_edge(0, 1, 1)
graph.add_edge(0, 2, 2)
graph.add_edge(1, 3, 3)

graph.adjacent(0)          # [2, 1]  (decreasing node id)
graph.bfs(0)               # [0, 2, 1, 3]
out_degree(graph, 0)       # 2
find_path(graph, 0, 3)     # [1, 2, 4]  (labels along the path)
```

Nodes are the ids `0` to `capacity - 1`; an id outside that range raises
`IndexError`. Each node carries a label and a visited flag; `dfs` keeps the
flags as they are, while `bfs`, `find_path` and most functions in
`graph_exercises` reset them before searching.

### Receipts

```python
from strutturedati.receipt import Product, Receipt

receipt = Receipt()
receipt.add(Product("pane", 2.0))
receipt.add(Product("latte", 1.5))
receipt.total()              # 3.5
receipt.most_expensive()     # Product(name='pane', price=2.0)
```

## Command line

Two programs are installed with the package.

```
strutturedati-expr postfix "2 3 + 4 *"
strutturedati-expr polish "12 3 -"
strutturedati-expr infix "(5*((9*8)+(7*(4+6))))"
```

prints the value of the expression, or its postfix form for `infix`.

```
strutturedati-hanoi 3
strutturedati-hanoi 3 --iterative
```

prints the moves for the given number of disks; without a number it reads
one from standard input.

## What it does not include

The package offers stacks, queues and matrix graphs only. It has no linked or
array-backed list types, no priority queue or heap, and no hash table or
dictionary type.