import time
from algorithms.lcs import lcs_length
from algorithms.similarity import compare_similarity, find_best_similarity

print("LCS 5k vs 5k")
a = "abcde" * 1000
b = "abXde" * 1000
t0 = time.time()
print(lcs_length(a, b), "secs:", round(time.time()-t0, 4))

print("LCS 20k vs 50 (row sized to the shorter input)")
t0 = time.time()
print(compare_similarity("abcd" * 5_000, "dcba" * 12), "secs:", round(time.time()-t0, 4))

print("best of 2000 candidates")
cands = [f"candidate-{i:05d}" for i in range(2000)]
t0 = time.time()
print(find_best_similarity("candidate-01234", cands), "secs:", round(time.time()-t0, 4))
