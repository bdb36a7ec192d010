"""
Offline quiz fallback
Used when the LLM is not configured, unreachable, or returns unusable output
"""

from typing import List
from raiku_quiz.schemas.quizzes import QuizQuestion

# Offline question bank, exactly QUESTION_COUNT entries
FALLBACK_QUESTIONS: List[QuizQuestion] = [
    QuizQuestion(
        question="What is Raiku primarily built to provide for Solana applications?",
        options=[
            "Guaranteed, deterministic transaction execution",
            "A new proof-of-work consensus",
            "A replacement for the Solana runtime",
            "Private transactions through zero-knowledge proofs",
        ],
        correct_answer_index=0,
    ),
    QuizQuestion(
        question="What does AOT stand for in Raiku?",
        options=["Automated Oracle Trigger", "Ahead-of-Time", "Asynchronous Order Transfer", "Atomic On-chain Token"],
        correct_answer_index=1,
    ),
    QuizQuestion(
        question="Which kind of transaction buys blockspace close to execution time?",
        options=["Ahead-of-Time (AOT)", "Batched settlement", "Just-in-Time (JIT)", "Vote transaction"],
        correct_answer_index=2,
    ),
    QuizQuestion(
        question="How is reserved blockspace allocated in Raiku?",
        options=[
            "First come, first served",
            "By validator stake only",
            "Randomly each epoch",
            "Through an auction-based slot marketplace",
        ],
        correct_answer_index=3,
    ),
    QuizQuestion(
        question="What do validators run to accept Raiku reservations?",
        options=["A validator sidecar", "A separate L2 sequencer", "A forked Solana client", "A bridge contract"],
        correct_answer_index=0,
    ),
    QuizQuestion(
        question="Which workload is a natural fit for AOT transactions?",
        options=[
            "A one-off NFT mint by a casual user",
            "Scheduled oracle updates and liquidations",
            "Reading an account balance",
            "Creating a new wallet",
        ],
        correct_answer_index=1,
    ),
    QuizQuestion(
        question="What problem on busy chains does Raiku address?",
        options=[
            "Lack of smart contract languages",
            "Too few validators",
            "Delayed or dropped transactions and unpredictable fees",
            "Missing block explorers",
        ],
        correct_answer_index=2,
    ),
    QuizQuestion(
        question="Does using Raiku's guarantees require a new token?",
        options=[
            "Yes, a dedicated gas token",
            "Yes, validators must stake a Raiku token",
            "Only for JIT transactions",
            "No, fees are paid for reserved blockspace",
        ],
        correct_answer_index=3,
    ),
    QuizQuestion(
        question="Which users does Raiku mainly target?",
        options=[
            "Trading desks, DEXs, payments and other latency-sensitive apps",
            "Only NFT collectors",
            "Only Solana core developers",
            "Offline hardware wallet users",
        ],
        correct_answer_index=0,
    ),
    QuizQuestion(
        question="Who shares the fees paid for guaranteed blockspace?",
        options=[
            "Nobody, fees are burned",
            "The validators that honour the reservations",
            "Only the Raiku foundation",
            "Liquidity providers on DEXs",
        ],
        correct_answer_index=1,
    ),
]

# Hand-authored hard questions, always merged into a configured Hard quiz
SPECIAL_HARD_QUESTIONS: List[QuizQuestion] = [
    QuizQuestion(
        question="What is the role of the Ackermann node in Raiku?",
        options=[
            "It mines new blocks",
            "It stores historical ledger data",
            "It runs scheduling logic and routes transactions to the validators producing reserved slots",
            "It signs transactions on behalf of users",
        ],
        correct_answer_index=2,
    ),
    QuizQuestion(
        question="How do Raiku extensions differ from launching a separate L2 or appchain?",
        options=[
            "They keep Solana's global state and liquidity while adding predictable execution",
            "They require a separate bridge and token",
            "They run on a different consensus network",
            "They cannot interact with Solana programs",
        ],
        correct_answer_index=0,
    ),
    QuizQuestion(
        question="Why does a validator sidecar not change Solana consensus?",
        options=[
            "It replaces the leader schedule",
            "It runs next to the validator client and only handles Raiku reservations",
            "It disables vote transactions",
            "It forks the chain for reserved slots",
        ],
        correct_answer_index=1,
    ),
]

def fallback_hard_subset(count: int, bank: List[QuizQuestion] = FALLBACK_QUESTIONS) -> List[QuizQuestion]:
    """First `count` bank questions, used to fill a Hard quiz next to the special set"""
    return list(bank[:count])
