"""
Example 1: Fitting a Categorical Distribution to Product Choices

Estimate the probability of each product being chosen from observed
customer choices, then use the fitted distribution for summaries and
simulation.

Model:
    choice ~ Categorical(p),   p = (p_1, ..., p_K)

The maximum likelihood estimate of p is the vector of observed frequencies.
"""

import mlx.core as mx
import numpy as np
from mlx_distributions import Categorical


def main():
    print("\n" + "="*70)
    print("Example 1: Categorical MLE (Product Choice)")
    print("="*70 + "\n")

    # Simulate product choices with labels 1..3
    print("Simulating customer product choices...")
    true_dist = Categorical([0.5, 0.3, 0.2])
    n_customers = 300
    choices = np.array(true_dist.sample(mx.random.key(42), shape=(n_customers,)))

    print(f"  True probabilities: {true_dist.probs.tolist()}\n")

    # Fit from sufficient statistics
    stats = Categorical.suffstats(3, choices)
    print(f"  Observed counts: {stats.counts.tolist()}")
    fitted = Categorical.fit_mle(stats, verbose=True)

    print("Fitted distribution summary:")
    print(f"  Mean:     {fitted.mean():.3f}")
    print(f"  Median:   {fitted.median()}")
    print(f"  Std:      {fitted.std():.3f}")
    print(f"  Mode:     {fitted.mode()}")
    print(f"  Entropy:  {fitted.entropy():.3f} nats")
    print(f"  90% quantile: {fitted.quantile(0.9)}")

    print("\nCumulative probabilities:")
    for k in range(1, fitted.num_categories + 1):
        print(f"  P(X <= {k}) = {fitted.cdf(k):.3f}")

    # Weighted fit: later customers count twice as much
    weights = np.where(np.arange(n_customers) >= n_customers // 2, 2.0, 1.0)
    weighted = Categorical.fit_mle(choices, w=weights)
    print(f"\nWeighted fit probabilities: {np.round(weighted.probs, 3).tolist()}")

    # Simulate future choices from the fitted model
    future = fitted.sample(mx.random.key(7), shape=(10000,))
    freqs = [float(mx.sum(future == k)) / 10000 for k in range(1, 4)]
    print(f"Simulated frequencies:      {np.round(freqs, 3).tolist()}\n")


if __name__ == "__main__":
    main()
