"""
Aggregation and classification engine.

Pure components that turn raw upstream records into a snapshot:
- TimeWindowCalculator
- ReviewAggregator
- CrashAggregator
- StatusClassifier
- ResponseAssembler
"""
