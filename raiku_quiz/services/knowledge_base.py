"""
Static knowledge base every prompt is grounded on
"""

# Number of questions in every quiz, generated or offline
QUESTION_COUNT = 10

RAIKU_CONTEXT = """
Raiku is a coordination and execution layer built for Solana. Its goal is to give
applications deterministic, guaranteed transaction execution instead of the
best-effort inclusion of the default transaction flow.

Core ideas:
- Guaranteed inclusion: applications can reserve blockspace ahead of time so their
  transactions land in a specific slot, removing the uncertainty of congestion,
  dropped transactions and failed retries.
- Ahead-of-Time (AOT) transactions: blockspace is reserved in advance for a future
  slot. AOT is suited to scheduled, predictable workloads such as market-maker
  quote updates, liquidations, oracle updates and settlement batches.
- Just-in-Time (JIT) transactions: blockspace is purchased close to execution for
  transactions that must land immediately, with a guarantee instead of a hope.
- Slot marketplace: reservations are allocated through an auction-based
  marketplace, so the price of guaranteed blockspace is discovered by demand.
- Ackermann node: the coordination node that runs Raiku's scheduling logic,
  receives reservations, and routes transactions to the validators that will
  produce the reserved slots.
- Validator sidecar: a lightweight module that participating validators run next to
  their client. It lets them accept Raiku reservations and earn additional revenue
  from guaranteed blockspace without changing Solana consensus.
- Extensions: Raiku lets teams build application-specific execution environments
  ("edge compute") that keep Solana's global state and liquidity while getting
  predictable performance, rather than launching a separate L2 or appchain.
- No new token is required to use the guarantees; fees are paid for reserved
  blockspace and shared with the validators that honour the reservations.

Who it is for: high-frequency trading desks, perpetual and spot DEXs, payment
processors, institutional settlement systems, games and any application that needs
predictable latency and certainty that a transaction will execute.

Why it matters: on a busy chain, transactions can be delayed or dropped and fees
spike unpredictably. Raiku turns blockspace into something that can be planned and
purchased with guarantees, which is what institutional and real-time applications
require before they move serious volume on-chain.
"""
